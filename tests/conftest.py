"""
Pytest configuration and shared fixtures for Dinky Response Sentinel tests.

Provides sample API objects carrying credentials so each test can check
exactly which fields were masked and which were left alone.
"""

import os
import sys

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sanitizer.models import DataBase, History, SqlExplainResult  # noqa: E402


@pytest.fixture(autouse=True)
def clear_sentinel_env(monkeypatch):
    """
    Remove pattern/mask overrides so every test starts from the defaults.
    This runs automatically before each test.
    """
    monkeypatch.delenv("SENTINEL_SENSITIVE_PATTERN", raising=False)
    monkeypatch.delenv("SENTINEL_MASK", raising=False)


@pytest.fixture(autouse=True)
def reset_default_sanitizer(monkeypatch):
    """Rebuild the process-wide sanitizer for every test."""
    from sanitizer import interceptor

    monkeypatch.setattr(interceptor, "_default_sanitizer", None)


@pytest.fixture
def secret_sql():
    """A Flink SQL script with two credential assignments."""
    return (
        "CREATE TABLE src (id INT) WITH ('connector'='jdbc', 'password'='s3cret', 'username'='root');\n"
        "CREATE TABLE dst (id INT) WITH ('password' = 'other pass', 'url'='jdbc:mysql://db:3306/x')"
    )


@pytest.fixture
def sample_history(secret_sql):
    """A history record whose statement embeds credentials."""
    return History(
        id=7,
        tenant_id=1,
        cluster_id=3,
        job_id="a1b2c3",
        job_name="sync-orders",
        status=2,
        statement=secret_sql,
        start_time="2024-01-01 10:00:00",
        end_time="2024-01-01 10:05:00",
    )


@pytest.fixture
def sample_database():
    """A data source with a stored password and Flink config."""
    return DataBase(
        id=11,
        name="orders",
        type="MySql",
        url="jdbc:mysql://db:3306/orders",
        username="root",
        password="abcdefgh12",
        flink_config="'password'='topsecret'",
        enabled=True,
    )


@pytest.fixture
def sample_explains(secret_sql):
    """Explain entries, one with credentials and one without."""
    return [
        SqlExplainResult(index=1, type="CREATE", sql="CREATE TABLE t WITH ('password'='x1')", parse_true=True),
        SqlExplainResult(index=2, type="INSERT", sql="INSERT INTO t SELECT 1", parse_true=True),
    ]
