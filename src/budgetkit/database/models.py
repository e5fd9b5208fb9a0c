"""SQLAlchemy models for budgetkit database.

Instants (transaction dates) are stored as naive UTC datetimes; conversion to
and from aware datetimes happens in the mappers and the database layer.
"""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Scope(Base):
    """Scope model (a single user or a family group)."""

    __tablename__ = "scopes"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    kind = Column(String(16), nullable=False, default="user")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    categories = relationship("Category", back_populates="scope", cascade="all, delete-orphan")
    transactions = relationship("Transaction", back_populates="scope", cascade="all, delete-orphan")
    spending_alerts = relationship("SpendingAlert", back_populates="scope", cascade="all, delete-orphan")
    savings_goals = relationship("SavingsGoal", back_populates="scope", cascade="all, delete-orphan")


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    scope_id = Column(Integer, ForeignKey("scopes.id"), nullable=False)
    name = Column(String(100), nullable=False)
    category_type = Column(String(16), nullable=False, default="expense")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (UniqueConstraint("scope_id", "name", name="uq_scope_category_name"),)

    # Relationships
    scope = relationship("Scope", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category", cascade="all, delete-orphan")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    scope_id = Column(Integer, ForeignKey("scopes.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    transaction_type = Column(String(16), nullable=False)
    date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_transactions_scope_date", "scope_id", "date"),)

    # Relationships
    scope = relationship("Scope", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


class SpendingAlert(Base):
    """Spending alert model."""

    __tablename__ = "spending_alerts"

    id = Column(Integer, primary_key=True)
    scope_id = Column(Integer, ForeignKey("scopes.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    name = Column(String(100), nullable=False)
    limit_amount = Column(Numeric(10, 2), nullable=False)
    period = Column(String(16), nullable=False, default="monthly")
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    scope = relationship("Scope", back_populates="spending_alerts")


class SavingsGoal(Base):
    """Savings goal model."""

    __tablename__ = "savings_goals"

    id = Column(Integer, primary_key=True)
    scope_id = Column(Integer, ForeignKey("scopes.id"), nullable=False)
    name = Column(String(100), nullable=False)
    target_amount = Column(Numeric(10, 2), nullable=False)
    current_amount = Column(Numeric(10, 2), nullable=False, default=0)
    target_date = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    scope = relationship("Scope", back_populates="savings_goals")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
