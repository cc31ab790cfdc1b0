from dataclasses import dataclass


@dataclass(frozen=True)
class SportId:
    """競技ID

    例: "cricket"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("SportId cannot be empty")

    def __str__(self) -> str:
        return self.value
