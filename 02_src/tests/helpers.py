"""Dialogs shared by the engine tests."""

from dialogcore.dialogs import Dialog


class EchoDialog(Dialog):
    """Says hello on begin and ends with the next message text."""

    async def begin_dialog(self, dc, options=None):
        await dc.context.send_activity(f"begin {self.id}")
        return Dialog.END_OF_TURN

    async def continue_dialog(self, dc):
        return await dc.end_dialog(dc.context.activity.text)


class ParentDialog(Dialog):
    """Starts a child on begin and ends with the child's result, shouted."""

    def __init__(self, dialog_id: str, child_id: str):
        super().__init__(dialog_id)
        self.child_id = child_id

    async def begin_dialog(self, dc, options=None):
        return await dc.begin_dialog(self.child_id)

    async def resume_dialog(self, dc, reason, result=None):
        return await dc.end_dialog(f"{result}!")
