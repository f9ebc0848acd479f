import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String, event, text
from sqlalchemy.orm import Mapped, mapped_column

from asset_api.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, utcnow


class Asset(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "assets"
    __table_args__ = (
        # (name, type) is unique among live rows only; soft-deleted rows may repeat
        Index(
            "uq_assets_name_type_active",
            "name",
            "type",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    acquisition_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<Asset id={self.id} name={self.name!r} type={self.type!r}>"


@event.listens_for(Asset, "before_insert")
def _before_insert(mapper, connection, target: Asset) -> None:
    now = utcnow()
    if not target.id:
        target.id = str(uuid.uuid4())
    target.created_at = now
    target.updated_at = now


@event.listens_for(Asset, "before_update")
def _before_update(mapper, connection, target: Asset) -> None:
    target.updated_at = utcnow()
