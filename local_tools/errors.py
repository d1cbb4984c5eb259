class LocalToolsError(Exception):
    """Base error for the local tools."""


class RemoteTableNotFoundError(LocalToolsError):
    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(
            f'Table "{table_name}" does not exist in the remote DynamoDB. '
            "Please create the table first before exporting and importing it to local DynamoDB."
        )
