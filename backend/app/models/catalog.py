from sqlalchemy import Column, Integer, String, Text, Boolean
from app.database import Base


class SportsProgram(Base):
    __tablename__ = "sports_program"

    sport_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    is_active = Column(Boolean, default=True)


class Location(Base):
    __tablename__ = "location"

    location_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    address = Column(String(300))
    city = Column(String(100))
    is_active = Column(Boolean, default=True)
