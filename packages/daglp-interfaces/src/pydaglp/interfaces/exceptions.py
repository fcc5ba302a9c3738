class DagLPError(Exception):
    pass


class UnknownCommitError(DagLPError, KeyError):
    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Unknown commit: {self.identifier}"


class CycleDetectedError(DagLPError):
    def __init__(self, identifier: str):
        super().__init__(f"Cycle detected at commit {identifier}")
        self.identifier = identifier


class CommitSourceError(DagLPError):
    pass
