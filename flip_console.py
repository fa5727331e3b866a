# flip_console
# -> Terminal side of the simulator: printing, reading input, pausing and clearing the screen.

import os
import subprocess


class ConsoleSink:
    def __init__(self, clear_screen: bool = True):
        self.clear_screen = clear_screen

    def write(self, text: str = "", end: str = "\n"):
        print(text, end=end, flush=True)

    def read_line(self, prompt: str = "") -> str:
        """Read one line from stdin, raises EOFError when input is closed"""
        return input(prompt)

    def pause(self):
        self.write("\nPress Enter to continue...")
        self.read_line()

    def clear(self):
        if not self.clear_screen:
            return
        command = "cls" if os.name == "nt" else "clear"
        subprocess.run(command, shell=True, check=False)
