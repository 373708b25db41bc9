from pydantic import BaseModel

# Database action schemas
class DatabaseActionRequest(BaseModel):
    action: str
