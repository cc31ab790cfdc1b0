from dataclasses import dataclass


@dataclass(frozen=True)
class DisplayName:
    """画面表示用の名称（コート名・競技名）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Display name cannot be empty")
        if len(self.value) > 50:
            raise ValueError("Display name is too long (max 50 characters)")

    def __str__(self) -> str:
        return self.value
