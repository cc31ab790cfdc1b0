from dataclasses import dataclass


@dataclass(frozen=True)
class CourtId:
    """コートID

    例: "court-a"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("CourtId cannot be empty")

    def __str__(self) -> str:
        return self.value
