from typing import Optional
from fastapi import APIRouter, Query
from ...schemas.utilities import (
    AnalyzeIn,
    ConvertIn,
    ConvertOut,
    HashIn,
    HashOut,
    PasswordConfig,
    PasswordOut,
    TextAnalysisOut,
    UuidOut,
)
from ...services import utilities

router = APIRouter(prefix="/utilidades", tags=["utilidades"])

@router.get("/uuid", response_model=UuidOut)
def uuid(quantidade: Optional[str] = Query(None, description="Quantidade de UUIDs (1-100)")):
    """Gera UUIDs v4. `uuids` é sempre uma lista, mesmo com um único item."""
    uuids = utilities.generate_uuids(quantidade)
    return UuidOut(quantidade=len(uuids), uuids=uuids)

@router.post("/hash", response_model=HashOut)
def hash_text(body: HashIn):
    h = utilities.digest(body.texto, body.algoritmo)
    return HashOut(texto=body.texto, algoritmo=body.algoritmo, hash=h, tamanho=len(h))

@router.get("/senha", response_model=PasswordOut)
def password(
    tamanho: Optional[str] = Query(None, description="Tamanho da senha (8-128)"),
    incluirNumeros: Optional[str] = None,
    incluirSimbolos: Optional[str] = None,
    incluirMaiusculas: Optional[str] = None,
    incluirMinusculas: Optional[str] = None,
):
    config = PasswordConfig(
        incluirNumeros=utilities.parse_flag(incluirNumeros),
        incluirSimbolos=utilities.parse_flag(incluirSimbolos),
        incluirMaiusculas=utilities.parse_flag(incluirMaiusculas),
        incluirMinusculas=utilities.parse_flag(incluirMinusculas),
    )
    senha = utilities.generate_password(
        length=tamanho,
        lowercase=config.incluirMinusculas,
        uppercase=config.incluirMaiusculas,
        digits=config.incluirNumeros,
        symbols=config.incluirSimbolos,
    )
    return PasswordOut(senha=senha, tamanho=len(senha), configuracao=config)

@router.post("/converter", response_model=ConvertOut)
def convert(body: ConvertIn):
    resultado = utilities.convert_text(body.texto, body.formato)
    return ConvertOut(original=body.texto, formato=body.formato, resultado=resultado)

@router.post("/analisar-texto", response_model=TextAnalysisOut)
def analyze(body: AnalyzeIn):
    return TextAnalysisOut.from_analysis(utilities.analyze_text(body.texto))
