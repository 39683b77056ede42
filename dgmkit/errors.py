"""Error type raised by the library."""


class DgmError(RuntimeError):
    """Runtime error carrying a plain message.

    ``str()`` gives the message with an ``Error message:`` prefix.
    The bare text is kept in ``message``.
    """

    def __init__(self, message):
        self.message = str(message)
        super().__init__(f"Error message: {self.message}")