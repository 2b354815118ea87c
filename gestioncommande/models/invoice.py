from sqlalchemy import Column, Date, Integer, Numeric, String

from gestioncommande.models.base import Base


class Invoice(Base):
    """
    Model for invoices (factures) issued by the order-management application.

    Attributes:
        id (int): Primary key, assigned by the database on first save
        number (str): Invoice number
        issued_on (date): Date the invoice was issued
        amount (Decimal): Invoiced amount
    """
    __tablename__ = "invoice"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String)
    issued_on = Column(Date)
    amount = Column(Numeric(12, 2))

    def __repr__(self):
        return f"<Invoice {self.id}>"
