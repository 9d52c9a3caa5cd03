from pydantic import BaseModel, ConfigDict, Field

class DocumentEntry(BaseModel):
    """One cataloged HTML file, as listed on the index page."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1, max_length=160)
