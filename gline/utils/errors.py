"""
Exception types for the gline parsing pipeline.
These never cross the Line API; parsing and rendering degrade instead.
"""


class GrammarError(RuntimeError):
    """The line grammar could not be applied to the given input."""

    def __init__(self, message: str, text: object = None):
        self.original_message = message
        self.text = text
        super().__init__(f"Grammar Error: {message}")

    def __str__(self):
        return f"Grammar Error: {self.original_message}"
