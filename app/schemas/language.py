from pydantic import BaseModel, Field


class LanguageOut(BaseModel):
    language: str = Field(..., description="Active language code, 'en' or 'zh'")
    label: str = Field(..., description="Text shown on the language control")


class LanguageUpdate(BaseModel):
    language: str
