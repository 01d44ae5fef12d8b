"""
SQLAlchemy table models for the catalog.
"""

from sqlalchemy import BigInteger, Boolean, Column, Float, ForeignKey, Integer, String

from .database import Base


class ContestRow(Base):
    """A contest or pseudo-contest, keyed by canonical id."""
    __tablename__ = "contests"

    id = Column(String, primary_key=True)
    raw_id = Column(String, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    platform = Column(String, nullable=False, index=True)
    phase = Column(String, nullable=False)
    start_time_seconds = Column(BigInteger, nullable=True)
    duration_seconds = Column(BigInteger, nullable=True)
    url = Column(String, nullable=False)


class ProblemRow(Base):
    """A problem, keyed by canonical id."""
    __tablename__ = "problems"

    id = Column(String, primary_key=True)
    contest_id = Column(String, ForeignKey("contests.id"), nullable=False, index=True)
    problem_index = Column("index", String, key="problem_index", nullable=False)
    name = Column(String, nullable=False)
    title = Column(String, nullable=False)
    platform = Column(String, nullable=False, index=True)
    category = Column(String, nullable=False, index=True)
    raw_point = Column(Float, nullable=True)
    difficulty = Column(Float, nullable=True, index=True)
    is_experimental = Column(Boolean, nullable=True)
    url = Column(String, nullable=False)
    solver_count = Column(Integer, nullable=True)
    submissions = Column(Integer, nullable=True)
    success_rate = Column(Float, nullable=True)


class ContestProblemRow(Base):
    """Contest ownership of a problem."""
    __tablename__ = "contest_problems"

    contest_id = Column(String, ForeignKey("contests.id"), primary_key=True)
    problem_id = Column(String, ForeignKey("problems.id"), primary_key=True)


class AlgorithmRow(Base):
    """Algorithm family grouping technical tags (e.g. "Graph")."""
    __tablename__ = "algorithms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)


class TechnicalTagRow(Base):
    """Curated tag with English and Japanese names."""
    __tablename__ = "technical_tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    en_name = Column(String, nullable=False)
    ja_name = Column(String, nullable=False)
    algorithm_id = Column(Integer, ForeignKey("algorithms.id"), nullable=False, index=True)


class ProblemTagRow(Base):
    __tablename__ = "problem_tags"

    problem_id = Column(String, ForeignKey("problems.id"), primary_key=True)
    technical_tag_id = Column(Integer, ForeignKey("technical_tags.id"), primary_key=True)
