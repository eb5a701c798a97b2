class LispError(Exception):
    """ Base class for all minilisp errors. Every one of them is fatal to the session."""
    pass

class LispSyntaxError(LispError):
    """ Raised by the reader on malformed input"""
    pass

class LispUnboundSymbol(LispError):
    """ Raised when a symbol is used before it is bound"""
    pass

class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""

class LispTypeError(LispError):
    """ Raised when a value of the wrong variant reaches a form or primitive"""

class LispBug(LispError):
    """ Raised on an internal consistency violation (a value that can never be evaluated or printed)"""

    def __init__(self, message: str):
        super().__init__(f"Bug: {message}")
