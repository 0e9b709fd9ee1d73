class TimestackError(Exception):
    pass


class WorkspaceNotFoundError(TimestackError):
    def __init__(self, workspace_id):
        super().__init__(f"workspace {workspace_id} does not exist")
        self.workspace_id = workspace_id


class RecordNotFoundError(TimestackError):
    def __init__(self, kind: str, record_id):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class WorkspaceMismatchError(TimestackError):
    """A row references a parent that lives in another workspace."""

    def __init__(self, kind: str, record_id, workspace_id):
        super().__init__(f"{kind} {record_id} does not belong to workspace {workspace_id}")
        self.kind = kind
        self.record_id = record_id
        self.workspace_id = workspace_id


class ImmutableFieldError(TimestackError):
    pass


class RedisNotStartedError(TimestackError):
    pass


class GithubClientNotInitialized(TimestackError):
    pass
