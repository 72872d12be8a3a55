"""Pytest configuration and fixtures."""

import enum
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    column_property,
    mapped_column,
    relationship,
)

from orm_swagger.schemas.descriptor_schema import FieldDescriptor, ModelDescriptor
from orm_swagger.sources.base import StaticModelSource

# --- SQLAlchemy test models ---


class BlogBase(DeclarativeBase):
    """Declarative base for the blog test models."""


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class Author(BlogBase):
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(320))
    bio: Mapped[str | None] = mapped_column(Text)
    role: Mapped[Role] = mapped_column(SAEnum(Role, name="role"))
    profile: Mapped[dict | None] = mapped_column(JSON)
    rating: Mapped[float | None] = mapped_column(Float)
    balance: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    posts: Mapped[list["Post"]] = relationship(back_populates="author")


class Post(BlogBase):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id"))

    author: Mapped[Author] = relationship(back_populates="posts")


class Comment(BlogBase):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True)
    body: Mapped[str] = mapped_column(Text)
    post_id: Mapped[int | None] = mapped_column(ForeignKey("posts.id"))
    body_upper: Mapped[str] = column_property(func.upper(body))

    post: Mapped[Post | None] = relationship()


# --- Descriptor fixtures ---


@pytest.fixture
def user_model() -> ModelDescriptor:
    """User model with two required fields and one optional field."""
    return ModelDescriptor(
        name="User",
        fields=(
            FieldDescriptor(name="id", type="Int", is_required=True),
            FieldDescriptor(name="email", type="String", is_required=True),
            FieldDescriptor(name="bio", type="String", is_required=False),
        ),
    )


@pytest.fixture
def article_model() -> ModelDescriptor:
    """Model mixing enum, relation and unknown scalar fields."""
    return ModelDescriptor(
        name="Article",
        fields=(
            FieldDescriptor(name="id", type="Int", is_required=True),
            FieldDescriptor(
                name="role",
                type="Role",
                kind="enum",
                is_required=True,
                enum_values=("ADMIN", "USER"),
            ),
            FieldDescriptor(name="author", type="User", kind="object"),
            FieldDescriptor(name="price", type="Decimal"),
            FieldDescriptor(name="published_at", type="DateTime"),
        ),
    )


@pytest.fixture
def static_source(
    user_model: ModelDescriptor, article_model: ModelDescriptor
) -> StaticModelSource:
    """Model source serving the User and Article descriptors."""
    return StaticModelSource([user_model, article_model])


@pytest.fixture
def blog_base() -> type[BlogBase]:
    """Declarative base with the Author, Post and Comment models."""
    return BlogBase
