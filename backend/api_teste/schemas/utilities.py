from typing import List
from pydantic import BaseModel, Field

class UuidOut(BaseModel):
    quantidade: int
    uuids: List[str]

class HashIn(BaseModel):
    texto: str
    algoritmo: str = Field("sha256", description="md5, sha1, sha256 ou sha512")

class HashOut(BaseModel):
    texto: str
    algoritmo: str
    hash: str
    tamanho: int

class PasswordConfig(BaseModel):
    incluirNumeros: bool
    incluirSimbolos: bool
    incluirMaiusculas: bool
    incluirMinusculas: bool

class PasswordOut(BaseModel):
    senha: str
    tamanho: int
    configuracao: PasswordConfig

class ConvertIn(BaseModel):
    texto: str
    formato: str = Field(..., description="base64, hex, uppercase, lowercase ou reverse")

class ConvertOut(BaseModel):
    original: str
    formato: str
    resultado: str

class AnalyzeIn(BaseModel):
    texto: str

class TextAnalysisOut(BaseModel):
    length: int = Field(..., alias="tamanho")
    words: int = Field(..., alias="palavras")
    characters: int = Field(..., alias="caracteres")
    non_whitespace: int = Field(..., alias="caracteresSemEspacos")
    lines: int = Field(..., alias="linhas")
    uppercase: int = Field(..., alias="maiusculas")
    lowercase: int = Field(..., alias="minusculas")
    digits: int = Field(..., alias="numeros")
    symbols: int = Field(..., alias="simbolos")
    blank: bool = Field(..., alias="vazio")

    class Config:
        from_attributes = True
        populate_by_name = True

    @classmethod
    def from_analysis(cls, analysis) -> "TextAnalysisOut":
        return cls.model_validate(analysis)
