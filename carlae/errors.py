

class CarlaeError(Exception):
    """ Base class for all Carlae errors"""
    pass

class CarlaeSyntaxError(CarlaeError):
    """ Raised when a token sequence is not exactly one well-formed form"""

class CarlaeNameError(CarlaeError):
    """ Raised when a name is not bound anywhere in the environment chain"""

class CarlaeEvaluationError(CarlaeError):
    """ Raised when a well-formed expression cannot be evaluated"""

class CarlaeArityError(CarlaeEvaluationError):
    """ Raised when a function or special form receives the wrong number of operands"""

class CarlaeTypeError(CarlaeEvaluationError):
    """ Raised when a value of the wrong kind is used, e.g. calling a number"""

class CarlaeZeroDivisionError(CarlaeEvaluationError):
    """ Raised when / divides by zero"""
