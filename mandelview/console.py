"""
Console input source for the interactive viewer.

Reads numbers as whitespace-separated tokens that may span several lines,
and the continue answer as a whole line. Malformed numbers are reported
and asked for again, so the controller only ever sees valid values.
"""

import sys

from .viewport import BASE_SPAN, span_for_zoom


class ConsoleInput:
    """Prompts on `out` and reads answers from `stream` (stdin/stdout by default)."""

    PROMPT_X = "Center on X axis: (float)"
    PROMPT_Y = "Center on Y axis: (float)"
    PROMPT_ZOOM = "Zoom level: (1 - 100% [initial], 1.5 - 150%, 2 - 200%...)"
    PROMPT_CONTINUE = "Continue? (y/n)"

    def __init__(self, stream=None, out=None, affirmative="y", base_span=BASE_SPAN):
        self.stream = stream if stream is not None else sys.stdin
        self.out = out if out is not None else sys.stdout
        self.affirmative = affirmative
        self.base_span = base_span
        self._tokens = []

    def _say(self, text):
        print(text, file=self.out, flush=True)

    def _next_token(self):
        while not self._tokens:
            line = self.stream.readline()
            if not line:
                raise EOFError("input stream exhausted")
            self._tokens = line.split()
        return self._tokens.pop(0)

    def read_float(self, prompt, positive=False):
        """Prompt until a valid float (strictly positive if requested) is entered."""
        self._say(prompt)
        while True:
            token = self._next_token()
            try:
                value = float(token)
            except ValueError:
                self._say(f"Not a number: {token!r}. {prompt}")
                continue
            if value != value or value in (float('inf'), float('-inf')):
                self._say(f"Not a finite number: {token!r}. {prompt}")
                continue
            if positive and value <= 0:
                self._say(f"Value must be greater than 0: {token!r}. {prompt}")
                continue
            return value

    def read_zoom(self):
        """Prompt until a zoom level with a usable view span is entered."""
        while True:
            zoom = self.read_float(self.PROMPT_ZOOM, positive=True)
            try:
                span_for_zoom(zoom, self.base_span)
            except ValueError:
                self._say(f"Zoom level out of range: {zoom!r}.")
                continue
            return zoom

    def read_view(self):
        """Return (center_x, center_y, zoom) for the next render."""
        center_x = self.read_float(self.PROMPT_X)
        center_y = self.read_float(self.PROMPT_Y)
        zoom = self.read_zoom()
        return center_x, center_y, zoom

    def read_continue(self):
        """
        Return the raw continue answer.

        Whatever remains on the line holding the zoom value is discarded;
        the answer is the next full line.
        """
        prompt = self.PROMPT_CONTINUE.replace("y/", f"{self.affirmative}/", 1)
        self._say(prompt)
        self._tokens = []
        line = self.stream.readline()
        if not line:
            raise EOFError("input stream exhausted")
        return line.rstrip("\r\n")
