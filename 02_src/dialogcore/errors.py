"""Engine error taxonomy."""


class DialogError(Exception):
    """Base class for dialog engine errors."""


class InvalidArgumentError(DialogError, ValueError):
    """A required argument is missing or malformed."""


class DialogNotFoundError(DialogError, LookupError):
    """A dialog id is not registered in the reachable dialog sets."""

    def __init__(self, dialog_id: str, operation: str = "begin_dialog"):
        self.dialog_id = dialog_id
        super().__init__(
            f"DialogContext.{operation}(): a dialog with an id of "
            f"'{dialog_id}' wasn't found."
        )


class DuplicateIdError(DialogError, ValueError):
    """A dialog id is already registered in a DialogSet."""

    def __init__(self, dialog_id: str):
        self.dialog_id = dialog_id
        super().__init__(
            f"DialogSet.add(): a dialog with an id of '{dialog_id}' "
            "already added."
        )
