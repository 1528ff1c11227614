class RispError(Exception):
    """ Base class for all Risp errors"""
    pass

class RispSyntaxError(RispError):
    """ Raised when source text cannot be read into an AST"""

class RispConfigError(RispError):
    """ Raised when a configuration value is invalid"""

class RispTypeMismatch(RispError):
    """ Raised when an operator receives an operand of the wrong runtime kind"""

class RispUnboundIdentifier(RispError):
    """ Raised when an identifier is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Cannot lookup unbound identifier {name}")
        self.name = name

class RispNotCallable(RispError):
    """ Raised when a non-function value is applied"""

class RispArityMismatch(RispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class RispNumericUnderflow(RispError):
    """ Raised when unsigned subtraction would produce a negative number"""

class RispStackExhausted(RispError):
    """ Raised when evaluation recurses deeper than the configured limit"""
