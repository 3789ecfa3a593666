"""
Growable character buffer used by the parser to stage token text.

Storage starts empty, jumps to BASE_CAPACITY slots on the first append and
doubles every time it fills up.  reset() keeps the storage around so a single
buffer serves every token of a parse.
"""

BASE_CAPACITY = 8


class TokenBuffer:
    """An append-only, geometrically growing character accumulator"""

    def __init__(self):
        self.cap = 0
        self.cnt = 0
        self.s = []

    def __len__(self):
        return self.cnt

    def grow(self):
        if self.cap < self.cnt + 1:
            self.cap = self.cap * 2 if self.cap >= BASE_CAPACITY else BASE_CAPACITY
            self.s.extend([''] * (self.cap - len(self.s)))

    def append(self, c):
        self.grow()
        self.s[self.cnt] = c
        self.cnt += 1

    def reset(self):
        self.cnt = 0

    def clear(self):
        self.cap = 0
        self.cnt = 0
        self.s = []

    def value(self):
        return ''.join(self.s[:self.cnt])
