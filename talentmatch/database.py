"""
Database schema and connection management.

Uses SQLite with SQLAlchemy for worker and job posting storage.
Skill tags live in child tables so their order survives a round trip.
"""

import uuid
from datetime import datetime
from pathlib import Path

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, create_engine
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import declarative_base, relationship, sessionmaker

from .models import DEFAULT_JOB_TYPE, JobSnapshot, WorkerSnapshot

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class WorkerSkill(Base):
    """One skill tag of a worker, at a fixed position."""

    __tablename__ = "worker_skills"

    worker_id = Column(String(36), ForeignKey("workers.id", ondelete="CASCADE"), primary_key=True)
    position = Column(Integer, primary_key=True)
    skill = Column(String, nullable=False)


class Worker(Base):
    """Worker (job candidate) model."""

    __tablename__ = "workers"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    phone = Column(String, nullable=True)
    experience_years = Column(Integer, nullable=False, default=0)
    resume_url = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    skill_rows = relationship(
        WorkerSkill,
        order_by=WorkerSkill.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    skills = association_proxy("skill_rows", "skill", creator=lambda s: WorkerSkill(skill=s))

    def to_snapshot(self) -> WorkerSnapshot:
        return WorkerSnapshot(
            id=self.id,
            name=self.name,
            email=self.email,
            skills=tuple(self.skills),
            experience_years=self.experience_years or 0,
            phone=self.phone,
            resume_url=self.resume_url,
        )


class JobRequirement(Base):
    """One required skill tag of a job posting, at a fixed position."""

    __tablename__ = "job_requirements"

    job_id = Column(String(36), ForeignKey("job_postings.id", ondelete="CASCADE"), primary_key=True)
    position = Column(Integer, primary_key=True)
    skill = Column(String, nullable=False)


class JobPosting(Base):
    """Job posting model."""

    __tablename__ = "job_postings"

    id = Column(String(36), primary_key=True, default=_new_id)
    client_id = Column(String(36), nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    salary_range = Column(String, nullable=True)
    location = Column(String, nullable=False)
    job_type = Column(String, nullable=False, default=DEFAULT_JOB_TYPE)  # full-time, part-time, contract, remote
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    requirement_rows = relationship(
        JobRequirement,
        order_by=JobRequirement.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    requirements = association_proxy("requirement_rows", "skill", creator=lambda s: JobRequirement(skill=s))

    def to_snapshot(self) -> JobSnapshot:
        return JobSnapshot(
            id=self.id,
            client_id=self.client_id,
            title=self.title,
            description=self.description or "",
            requirements=tuple(self.requirements),
            salary_range=self.salary_range,
            location=self.location,
            job_type=self.job_type,
            is_active=bool(self.is_active),
        )


def init_database(db_path: Path) -> None:
    """
    Initialize database and create tables.

    Args:
        db_path: Path to SQLite database file
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)


def get_session(db_path: Path):
    """
    Get database session.

    Args:
        db_path: Path to SQLite database file

    Returns:
        SQLAlchemy session
    """
    engine = create_engine(f"sqlite:///{db_path}")
    Session = sessionmaker(bind=engine)
    return Session()
