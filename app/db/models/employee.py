from sqlalchemy import Column, Integer, String

from app.db.base import BaseModel


class Employee(BaseModel):
    __tablename__ = "employees"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(256), index=True)
    birthday = Column(String(256))
    gender = Column(String(256))
    salary = Column(String(256))
    prog_lang = Column(String(256))
    importance = Column(String(256))
