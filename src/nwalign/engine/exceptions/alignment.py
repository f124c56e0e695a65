class AlignmentException(Exception):
    pass

class TracebackInvariantViolationException(AlignmentException):
    def __init__(self, row: int, column: int, stored_direction):
        self.row = row
        self.column = column
        self.stored_direction = stored_direction
        super().__init__(f"No traceback direction recorded for interior cell ({row}, {column}) (stored value: {stored_direction!r}).")

class AlignmentEngineNotStartedException(AlignmentException):
    def __init__(self):
        super().__init__("The alignment engine must be entered as a context manager before submitting work.")
