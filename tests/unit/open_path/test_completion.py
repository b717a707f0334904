"""Tests for open-path completion candidates, confirmation, and stale reads."""

from __future__ import annotations

import asyncio
import tempfile
import unittest
from pathlib import Path

from pathpicker.file_tree_model import DirectoryChild, LocalDirectoryLister, Worktree, WorktreeDirectoryLister
from pathpicker.open_path import POSIX, WINDOWS, CompletionSession, default_query, preselect_name

FIXTURE = {
    "a1": "A1",
    "a2": "A2",
    "a3": "A3",
    "dir1": {},
    "dir2": {
        "c": "C",
        "d1": "D1",
        "d2": "D2",
        "d3": "D3",
        "dir3": {},
        "dir4": {},
    },
}


def _session(creating_path: bool = False, style=POSIX) -> CompletionSession:
    lister = WorktreeDirectoryLister(Worktree.from_mapping("root", FIXTURE))
    return CompletionSession(lister, creating_path=creating_path, path_style=style)


class CompletionCandidateTests(unittest.IsolatedAsyncioTestCase):
    async def test_candidates_follow_typed_path(self) -> None:
        session = _session()
        cases = [
            ("sadjaoislkdjasldj", []),
            ("/root", ["root"]),
            ("/root/", ["./", "a1", "a2", "a3", "dir1", "dir2"]),
            ("/root/a", ["a1", "a2", "a3"]),
            ("/root/d", ["dir1", "dir2"]),
            ("/root/dir2", ["dir2"]),
            ("/root/dir2/", ["./", "c", "d1", "d2", "d3", "dir3", "dir4"]),
            ("/root/dir2/d", ["d1", "d2", "d3", "dir3", "dir4"]),
            ("/root/dir2/di", ["dir3", "dir4"]),
        ]
        for query, expected in cases:
            with self.subTest(query=query):
                await session.update_matches(query)
                self.assertEqual(session.collect_match_candidates(), expected)

    async def test_prefix_match_ignores_case_but_not_position(self) -> None:
        session = _session()

        await session.update_matches("/root/DIR")
        self.assertEqual(session.collect_match_candidates(), ["dir1", "dir2"])

        await session.update_matches("/root/ir")
        self.assertEqual(session.collect_match_candidates(), [])

    async def test_unreadable_directory_yields_no_candidates(self) -> None:
        session = _session()

        await session.update_matches("/root/missing/")

        self.assertEqual(session.collect_match_candidates(), [])
        self.assertIsNone(session.confirm_completion("/root/missing/", 0))

    async def test_creating_mode_offers_typed_name(self) -> None:
        session = _session(creating_path=True)
        cases = [
            ("/root", ["root"]),
            ("/root/d", ["d", "dir1", "dir2"]),
            ("/root/dir1", ["dir1"]),
            ("/root/dir12", ["dir12"]),
            ("/root/dir1", ["dir1"]),
        ]
        for query, expected in cases:
            with self.subTest(query=query):
                await session.update_matches(query)
                self.assertEqual(session.collect_match_candidates(), expected)

        await session.update_matches("/root/dir12")
        self.assertEqual(session.confirm_completion("/root/dir12", 0), "/root/dir12")


class CompletionConfirmTests(unittest.IsolatedAsyncioTestCase):
    async def _confirm(self, session: CompletionSession, query: str, index: int) -> str | None:
        await session.update_matches(query)
        return session.confirm_completion(query, index)

    async def test_confirm_completion_appends_separator_for_directories(self) -> None:
        session = _session()
        cases = [
            ("/root", 0, "/root/"),
            ("/root/", 0, None),
            ("/root/", 1, "/root/a1"),
            ("/root/", 4, "/root/dir1/"),
            ("/root/a", 0, "/root/a1"),
            ("/root/d", 1, "/root/dir2/"),
            ("/root/dir2", 0, "/root/dir2/"),
            ("/root/dir2/", 1, "/root/dir2/c"),
            ("/root/dir2/", 5, "/root/dir2/dir3/"),
            ("/root/dir2/d", 3, "/root/dir2/dir3/"),
            ("/root/dir2/di", 1, "/root/dir2/dir4/"),
        ]
        for query, index, expected in cases:
            with self.subTest(query=query, index=index):
                self.assertEqual(await self._confirm(session, query, index), expected)

    async def test_windows_style_echoes_typed_separators(self) -> None:
        session = _session(style=WINDOWS)

        await session.update_matches("C:/root/")
        self.assertEqual(session.collect_match_candidates(), [".\\", "a1", "a2", "a3", "dir1", "dir2"])
        self.assertIsNone(session.confirm_completion("C:/root/", 0))
        self.assertEqual(session.confirm_completion("C:/root/", 1), "C:/root/a1")

        await session.update_matches("C:\\root/")
        self.assertEqual(session.confirm_completion("C:\\root/", 1), "C:\\root/a1")

        await session.update_matches("C:\\root\\")
        self.assertEqual(session.confirm_completion("C:\\root\\", 1), "C:\\root\\a1")

        cases = [
            ("C:/root/d", 1, "C:/root/dir2\\"),
            ("C:\\root/d", 0, "C:\\root/dir1\\"),
            ("C:\\root\\d", 0, "C:\\root\\dir1\\"),
            ("c:/root/d", 0, "c:/root/dir1\\"),
        ]
        for query, index, expected in cases:
            with self.subTest(query=query):
                self.assertEqual(await self._confirm(session, query, index), expected)

    async def test_posix_style_on_any_platform(self) -> None:
        session = _session(style=POSIX)

        await session.update_matches("/root/d")
        self.assertEqual(session.collect_match_candidates(), ["dir1", "dir2"])
        self.assertEqual(session.confirm_completion("/root/d", 0), "/root/dir1/")

    async def test_confirm_without_index_uses_cursor(self) -> None:
        session = _session()
        await session.update_matches("/root/")

        session.set_selected_index(2)

        self.assertEqual(session.confirm_completion("/root/"), "/root/a2")


class CompletionOrderingTests(unittest.IsolatedAsyncioTestCase):
    async def test_stale_read_is_dropped(self) -> None:
        release_slow = asyncio.Event()

        class GatedLister:
            async def read_directory(self, path: str) -> list[DirectoryChild]:
                if path == "/slow/":
                    await release_slow.wait()
                    return [DirectoryChild(name="old", is_dir=False)]
                return [DirectoryChild(name="new", is_dir=False)]

        session = CompletionSession(GatedLister(), path_style=POSIX)
        slow = asyncio.create_task(session.update_matches("/slow/"))
        await asyncio.sleep(0)

        fast_result = await session.update_matches("/fast/")
        release_slow.set()
        slow_result = await slow

        self.assertIsNone(slow_result)
        self.assertEqual([candidate.name for candidate in fast_result or []], ["./", "new"])
        self.assertEqual(session.query, "/fast/")
        self.assertEqual(session.collect_match_candidates(), ["./", "new"])

    async def test_new_update_resets_cursor(self) -> None:
        session = _session()
        await session.update_matches("/root/")
        session.set_selected_index(4)

        await session.update_matches("/root/dir2/")

        self.assertEqual(session.selected_index, 0)


class CompletionPreselectTests(unittest.IsolatedAsyncioTestCase):
    async def test_preselect_selects_file_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            for name in ("a1", "a2", "a3"):
                (root / name).write_text(name, encoding="utf-8")
            (root / "dir1").mkdir()
            initial = f"{root}/a2"

            query = default_query(initial, POSIX)
            session = CompletionSession(LocalDirectoryLister(root), path_style=POSIX)
            session.with_preselect(preselect_name(initial, POSIX))
            self.assertTrue(query.endswith("/"))

            await session.update_matches(query)
            candidates = session.collect_match_candidates()
            self.assertEqual(candidates, ["./", "a1", "a2", "a3", "dir1"])
            self.assertEqual(candidates[session.selected_index], "a2")

            await session.update_matches(query)
            self.assertEqual(session.selected_index, 0)

    async def test_path_rejected_by_os_yields_no_candidates(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            session = CompletionSession(LocalDirectoryLister(root), path_style=POSIX)

            result = await session.update_matches(f"{root}/a\x00b/")

        self.assertEqual(result, [])
        self.assertEqual(session.collect_match_candidates(), [])

    async def test_local_lister_relative_query(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "notes").mkdir()
            (root / "notes" / "todo.md").write_text("", encoding="utf-8")
            session = CompletionSession(LocalDirectoryLister(root), path_style=POSIX)

            await session.update_matches("no")
            self.assertEqual(session.confirm_completion("no", 0), "notes/")

            await session.update_matches("notes/t")
            self.assertEqual(session.confirm_completion("notes/t", 0), "notes/todo.md")


if __name__ == "__main__":
    unittest.main()
