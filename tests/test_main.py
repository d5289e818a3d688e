"""
Tests for the demo flow
"""

import json
import pytest
from todolist.main import example_flow


@pytest.mark.asyncio
async def test_example_flow_creates_task(task_repository, tasks_file):
    """Test that the example flow adds one task and persists it"""
    manager = await example_flow(task_repository)

    stats = await manager.statistics()
    assert stats.total == 1
    assert stats.by_difficulty == {"high": 1}

    with open(tasks_file, 'r', encoding='utf-8') as f:
        data = json.load(f)
    assert data[0]["title"] == "Prepare presentation"
    assert data[0]["priority"] == 5
