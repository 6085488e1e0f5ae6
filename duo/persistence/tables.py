"""SQLAlchemy table definitions for Duo.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("user_id", UUID, primary_key=True),  # Auth platform user ID
    Column("email", String(320), nullable=True),  # Verified account email, lowercased
    Column("full_name", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("partner_email", String(320), nullable=True),
    Column(
        "couple_id",
        UUID,
        ForeignKey("couples.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_email", profiles_table.c.email)
Index("idx_profiles_couple_id", profiles_table.c.couple_id)

# ============================================================================
# COUPLES TABLE
# ============================================================================
couples_table = Table(
    "couples",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("user1_id", UUID, nullable=False, unique=True),
    Column("user2_id", UUID, nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("user1_id <> user2_id", name="ck_couples_distinct_members"),
)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("inviter_id", UUID, nullable=False),
    Column("invitee_email", String(320), nullable=False),
    Column("invitation_token", String(255), nullable=False, unique=True),
    Column(
        "status",
        Enum("pending", "accepted", "expired", name="invitation_status"),
        nullable=False,
        server_default="pending",
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by_user_id", UUID, nullable=True),
)

Index(
    "idx_invitations_inviter_created",
    invitations_table.c.inviter_id,
    invitations_table.c.created_at.desc(),
)
Index("idx_invitations_invitee_email", invitations_table.c.invitee_email)
# One pending invitation per inviter/email pair
Index(
    "uq_invitations_pending_pair",
    invitations_table.c.inviter_id,
    invitations_table.c.invitee_email,
    unique=True,
    postgresql_where=invitations_table.c.status == "pending",
)
