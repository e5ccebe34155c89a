class GlossaryError(Exception):
    """Base exception class for the glossary generator."""
    def __init__(self, message="An error occurred while generating the glossary"):
        self.message = message
        super().__init__(self.message)

class MalformedInputError(GlossaryError):
    """Exception raised when the input file can't be turned into a glossary."""
    def __init__(self, message="The glossary input is malformed"):
        super().__init__(message)

class EmptyInputError(MalformedInputError):
    """Exception raised when the input file holds no term/definition records."""
    def __init__(self, message="The glossary input contains no terms"):
        super().__init__(message)

class MissingResourceError(GlossaryError):
    """Exception raised when the input file or output folder can't be used."""
    def __init__(self, message="A required file or folder is missing or inaccessible"):
        super().__init__(message)
