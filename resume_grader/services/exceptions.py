class GraderError(Exception):
    """Base class for errors raised while grading a resume."""

    def __init__(self, message: str = "Resume grading failed"):
        self.message = message
        super().__init__(message)


class DocumentMissingError(GraderError):
    """No resume document was supplied, or it was empty."""

    def __init__(self, message: str = "You must provide a PDF file or URL"):
        super().__init__(message)


class DocumentParsingError(GraderError):
    """The supplied document could not be read as a PDF."""

    def __init__(self, message: str = "Resume file could not be read as a PDF"):
        super().__init__(message)


class DocumentTooLargeError(GraderError):
    def __init__(self, message: str = "Resume file is too large"):
        super().__init__(message)


class GradingError(GraderError):
    """The model call failed or produced no result."""

    def __init__(self, message: str = "Could not complete the call to the artificial intelligence"):
        super().__init__(message)


class GradeValidationError(GraderError):
    """The model reply did not match the grade schema."""

    def __init__(self, message: str = "Model response did not match the grade schema"):
        super().__init__(message)


class TrainingDataError(GraderError):
    def __init__(self, message: str = "Training examples could not be loaded"):
        super().__init__(message)
