"""Contract tests ensuring sync and async walkers have identical behavior.

These tests verify that both implementations:
1. Yield the same entries in the same order
2. Report the same depths and entry types
3. Handle errors identically
4. Can be abandoned part way without leaving work behind
"""

import asyncio
import re
from pathlib import Path
from typing import List, Tuple

import pytest

from dazzlewalk import AsyncWalker, CollectErrorsPolicy, Walker, WalkOptions, walk, walk_async
from dazzlewalk.testing import FaultInjectingAdapter, build_tree, make_symlink, symlinks_supported


def create_standard_tree(root: Path) -> Path:
    """Create a standard test tree.

    Tree structure:
    root/
    ├── dir1/
    │   ├── file1.txt
    │   └── file2.py
    ├── dir2/
    │   ├── subdir/
    │   │   └── deep.txt
    │   └── file3.py
    ├── empty/
    └── root_file.txt
    """
    build_tree(root, [
        "dir1/file1.txt",
        "dir1/file2.py",
        "dir2/subdir/deep.txt",
        "dir2/file3.py",
        "empty/",
        "root_file.txt",
    ])
    if symlinks_supported():
        make_symlink(root / "dir2", root / "dir1" / "to_dir2")
    return root


def snapshot(entries) -> List[Tuple]:
    return [(e.path, e.depth, e.entry_type, e.is_symlink) for e in entries]


OPTION_SETS = [
    {},
    {'max_depth': 1},
    {'max_depth': 2},
    {'exts': ['.py']},
    {'exts': ['.txt', '.py'], 'include_dirs': False},
    {'match': [re.compile('dir2')]},
    {'match': ['*.txt', lambda p: p.endswith('empty')]},
    {'skip': [re.compile('dir1')]},
    {'skip': ['*.py'], 'max_depth': 3},
    {'follow_symlinks': True},
    {'follow_symlinks': True, 'include_dirs': False, 'exts': '.txt'},
    {'include_files': False},
]


class TestWalkContract:
    """Both walkers must agree for every configuration."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("options", OPTION_SETS, ids=lambda o: repr(sorted(o)))
    async def test_same_entries_same_order(self, tmp_path, options):
        root = create_standard_tree(tmp_path)

        sync_entries = snapshot(walk(root, **options))
        async_entries = snapshot([e async for e in walk_async(root, **options)])

        assert sync_entries == async_entries

    @pytest.mark.asyncio
    async def test_depths(self, tmp_path):
        root = create_standard_tree(tmp_path)
        depths = {Path(e.path).relative_to(root).as_posix(): e.depth
                  async for e in walk_async(root)}

        assert depths["dir1"] == 1
        assert depths["root_file.txt"] == 1
        assert depths["dir2/subdir"] == 2
        assert depths["dir2/subdir/deep.txt"] == 3

    @pytest.mark.asyncio
    async def test_same_errors(self, tmp_path):
        root = create_standard_tree(tmp_path)
        broken = str(root / "dir2")
        adapter = FaultInjectingAdapter(list_errors={broken: PermissionError(13, "denied", broken)})

        sync_policy, async_policy = CollectErrorsPolicy(), CollectErrorsPolicy()
        sync_entries = snapshot(walk(root, adapter=adapter, on_error=sync_policy))
        async_entries = snapshot([e async for e in walk_async(root, adapter=adapter, on_error=async_policy)])

        assert sync_entries == async_entries
        assert sync_policy.paths == async_policy.paths == [broken]

    def test_walker_state_not_shared(self, tmp_path):
        """Two walks over the same root are independent."""
        root = create_standard_tree(tmp_path)
        walker = Walker(root, WalkOptions(follow_symlinks=True))

        first, second = iter(walker), iter(walker)
        interleaved = []
        for a, b in zip(first, second):
            interleaved.append((a.path, b.path))

        assert all(a == b for a, b in interleaved)
        assert len(interleaved) == len(list(walker))


class TestAbandonment:
    """Stopping early must not leave work behind."""

    def test_sync_generator_close(self, tmp_path):
        root = create_standard_tree(tmp_path)
        adapter = FaultInjectingAdapter()

        iterator = walk(root, adapter=adapter)
        next(iterator)
        listed_before = len(adapter.listed_paths())
        iterator.close()

        with pytest.raises(StopIteration):
            next(iterator)
        assert len(adapter.listed_paths()) == listed_before

    @pytest.mark.asyncio
    async def test_async_generator_aclose(self, tmp_path):
        root = create_standard_tree(tmp_path)
        adapter = FaultInjectingAdapter()

        iterator = walk_async(root, adapter=adapter)
        first = await iterator.__anext__()
        assert first.depth == 1
        listed_before = len(adapter.listed_paths())
        await iterator.aclose()

        with pytest.raises(StopAsyncIteration):
            await iterator.__anext__()
        assert len(adapter.listed_paths()) == listed_before

    @pytest.mark.asyncio
    async def test_break_out_of_async_for(self, tmp_path):
        root = create_standard_tree(tmp_path)
        seen = []
        async for entry in AsyncWalker(root):
            seen.append(entry)
            if len(seen) == 2:
                break
        assert len(seen) == 2


class TestSuspension:
    """The async walker yields control to the event loop while it works."""

    @pytest.mark.asyncio
    async def test_other_tasks_run_during_walk(self, tmp_path):
        root = create_standard_tree(tmp_path)
        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                ticks += 1
                await asyncio.sleep(0)

        task = asyncio.create_task(ticker())
        try:
            entries = [e async for e in walk_async(root)]
        finally:
            task.cancel()

        assert entries
        assert ticks > 0
