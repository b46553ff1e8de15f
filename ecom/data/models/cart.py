#ecom/data/models/cart.py
from sqlalchemy import Column, Integer
from sqlalchemy.orm import relationship

from ecom.data.database import Base


class CartModel(Base):
    __tablename__ = "cart"

    id = Column(Integer, primary_key=True)

    lines = relationship(
        "ProductCartModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="ProductCartModel.id",
    )
    user = relationship("UserDetailsModel", back_populates="cart", uselist=False)

    # back_populates trzyma line.cart w zgodzie z kolekcja lines
    def add_line(self, line) -> "CartModel":
        self.lines.append(line)
        return self

    def remove_line(self, line) -> "CartModel":
        self.lines.remove(line)
        return self

    def set_lines(self, lines) -> "CartModel":
        # stare linie dostaja cart = None, nowe wskazuja na ten koszyk
        self.lines = list(lines)
        return self
