from sqlalchemy import Column, Date, Integer, String

from gestioncommande.models.base import Base


class Delivery(Base):
    """
    Model for deliveries (livraisons) of customer orders.

    Attributes:
        id (int): Primary key, assigned by the database on first save
        delivered_on (date): Delivery date
        address (str): Delivery address
        status (str): Free-form delivery status
    """
    __tablename__ = "delivery"

    id = Column(Integer, primary_key=True, autoincrement=True)
    delivered_on = Column(Date)
    address = Column(String)
    status = Column(String)

    def __repr__(self):
        return f"<Delivery {self.id}>"
