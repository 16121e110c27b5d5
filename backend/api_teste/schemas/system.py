from pydantic import BaseModel

class SizedValue(BaseModel):
    bytes: int
    formatado: str

class MemoryOut(BaseModel):
    total: SizedValue
    livre: SizedValue
    usada: SizedValue
    percentualUsado: str
    percentualLivre: str

class HealthMemory(BaseModel):
    livre: str
    status: str

class HealthOut(BaseModel):
    status: str
    timestamp: str
    uptime: float
    memoria: HealthMemory
