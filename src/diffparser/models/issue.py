from pydantic import BaseModel


class ParseIssue(BaseModel):
    """A hunk, or part of one, that was left out of the result."""
    model_config = {"frozen": True}

    file_name: str
    hunk_number: int  # 1-based, counting every @@ line of the file
    line_number: int  # 1-based, in the raw diff text
    header: str
    reason: str
