"""pytest configuration and fixtures for semantic-formgen tests."""

import datetime
import decimal
from dataclasses import dataclass, field
from typing import List, Optional

import pytest
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Table, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# ==================== DATACLASS MODELS ====================

@dataclass
class Person:
    first_name: str
    last_name: Optional[str] = None
    email: str = ""
    password: str = ""
    admin: bool = False


@dataclass
class Label:
    name: str


@dataclass
class Article:
    title: str
    body: str = field(default="", metadata={"column_type": "text"})
    author: Optional[Person] = None
    created_at: Optional[datetime.datetime] = None


@dataclass
class Settings:
    password: bool = False
    age: int = 0
    ratio: float = 0.0
    price: decimal.Decimal = decimal.Decimal("0")
    birthday: Optional[datetime.date] = None
    wakes_at: Optional[datetime.time] = None
    updated: Optional[datetime.datetime] = None
    homepage_url: str = ""
    fax: str = ""
    search: str = ""
    home_country: str = ""
    time_zone: str = ""
    labels: List[Label] = field(default_factory=list)


# ==================== SQLALCHEMY MODELS ====================

class Base(DeclarativeBase):
    pass


post_tags = Table(
    "post_tags",
    Base.metadata,
    Column("post_id", ForeignKey("posts.id"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id"), primary_key=True),
)


class Author(Base):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(50))
    last_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    posts = relationship("Post", back_populates="author")


class Tag(Base):
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(30))


class Post(Base):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(Boolean, default=False)
    price: Mapped[Optional[decimal.Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    created_at: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime, nullable=True)
    author = relationship("Author", back_populates="posts")
    tags = relationship("Tag", secondary=post_tags)


# ==================== FIXTURES ====================

@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore default configuration and drop cached renderer bindings."""
    from semantic_formgen.protocols import set_form_config
    from semantic_formgen.forms.renderer_registry import RENDERERS

    set_form_config(None)
    RENDERERS.clear_cache()
    yield
    set_form_config(None)
    RENDERERS.clear_cache()


@pytest.fixture
def person():
    return Person(first_name="Ann", last_name="Lee", email="ann@example.com")


@pytest.fixture
def article(person):
    return Article(title="Hello", body="First post", author=person)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def labels():
    return [Label("red"), Label("blue")]


@pytest.fixture
def post():
    author = Author(id=1, first_name="Bob", last_name="Stone")
    return Post(id=7, author=author, author_id=1, title="Mapped", body="Text", tags=[Tag(id=3, name="news")])


@pytest.fixture
def builder(article):
    from semantic_formgen.forms.form_builder import FormBuilder
    return FormBuilder(article)
