from pydantic import BaseModel


class Report(BaseModel):
    """Holds report content; displaying it is its only job."""

    title: str
    text: str

    def display(self) -> None:
        print(f"=== {self.title} ===\n{self.text}")
