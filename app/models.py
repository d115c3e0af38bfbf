from sqlalchemy import Column, Integer, Text, REAL
from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    price = Column(REAL, nullable=False)

    # AUTOINCREMENT keeps deleted ids from being handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "price": self.price}
