# filma/core/schemas/movie.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional


class MovieBase(BaseModel):
    title_file: str = Field(..., description="Titre du fichier", examples=["Inception"])
    disk: Optional[str] = Field(None, description="Nom du disque", examples=["Disque1"])
    file: Optional[str] = Field(None, description="Nom du fichier", examples=["inception.mp4"])
    sub_file: Optional[str] = Field(None, description="Nom du fichier de sous-titres", examples=["inception.srt"])
    type_file: Optional[str] = Field(None, description="Type de fichier", examples=["mp4"])
    size: Optional[str] = Field(None, description="Taille du fichier", examples=["1.5GB"])
    is_new: bool = Field(False, description="Indique si le film est nouveau", examples=[True])

    @field_validator("is_new", mode="before")
    @classmethod
    def null_is_not_new(cls, v):
        # null explicite -> false, comme un champ absent
        return False if v is None else v


class MovieInput(MovieBase):
    """Corps de requête pour POST /movies et PUT /movies/{id}"""
    title_file: str = Field(..., min_length=1, description="Titre du fichier", examples=["Inception"])


class Movie(MovieBase):
    id: int = Field(..., description="ID du film", examples=[1])

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    code: str
    reference: Optional[str] = None
    details: Optional[List[Any]] = None
