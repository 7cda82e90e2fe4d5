"""Line-oriented command interpreter for named binary search trees."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from typing import Iterable, Iterator, TextIO

from bstmenu.elements import ElementType, element_type_for
from bstmenu.tree import BinaryTree

_WORD = re.compile(r"\s*(\S+)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class MenuError(Exception):
    """Raised when a command cannot be carried out at all."""


def _take_tokens(text: str, count: int) -> tuple[list[str], str]:
    """Split up to ``count`` tokens off ``text``; return them and the remainder.

    Missing tokens come back as empty strings.
    """
    tokens: list[str] = []
    for _ in range(count):
        match = _WORD.match(text)
        if match is None:
            tokens.append("")
            text = ""
            continue
        tokens.append(match.group(1))
        text = text[match.end():]
    return tokens, text


def _leading_int(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class MenuSession:
    """Holds named trees and runs commands against the selected one."""

    def __init__(self, output: TextIO) -> None:
        self.output = output
        self.trees: dict[str, BinaryTree] = {}
        self.current = ""
        self._pending: deque[str] = deque()

    def _say(self, text: str) -> None:
        self.output.write(text + "\n")

    def _tree(self, name: str | None = None) -> BinaryTree:
        key = self.current if name is None else name
        try:
            return self.trees[key]
        except KeyError:
            if name is None:
                raise MenuError("no tree selected") from None
            raise MenuError(f"no such tree: {name}") from None

    def _type(self) -> ElementType:
        return self._tree().element_type

    def _next_line(self, lines: Iterator[str]) -> str | None:
        if self._pending:
            return self._pending.popleft()
        line = next(lines, None)
        return None if line is None else _strip_newline(line)

    def _read_tokens(self, count: int, lines: Iterator[str]) -> list[str]:
        """Read ``count`` whitespace-separated tokens from the following lines.

        Whatever follows the last token on its line is read later as a line.
        """
        tokens: list[str] = []
        buffer = ""
        while len(tokens) < count:
            match = _WORD.match(buffer)
            if match is None:
                line = self._next_line(lines)
                if line is None:
                    raise MenuError("unexpected end of input")
                buffer = line
                continue
            tokens.append(match.group(1))
            buffer = buffer[match.end():]
        if count > 0:
            self._pending.appendleft(buffer)
        return tokens

    def execute(self, line: str, lines: Iterable[str] = ()) -> None:
        """Run one command line; ``lines`` supplies input for multi-line commands."""
        more = iter(lines)
        if not line:
            return
        (cmd,), rest = _take_tokens(line, 1)

        if cmd == "CREATE":
            (name, type_name), _ = _take_tokens(rest, 2)
            try:
                element_type = element_type_for(type_name)
            except ValueError:
                self._say("Unknown type")
                return
            self.trees[name] = BinaryTree(element_type)
            self.current = name
            self._say(f"Created {name}")
        elif cmd == "SELECT":
            (name,), _ = _take_tokens(rest, 1)
            if name not in self.trees:
                self._say("No such tree")
                return
            self.current = name
            self._say(f"Selected {name}")
        elif cmd == "INSERT":
            (text,), _ = _take_tokens(rest, 1)
            ok = self._tree().insert(self._type().parse(text))
            self._say(f"{'Inserted' if ok else 'Exists'} {text}")
        elif cmd == "SEARCH":
            (text,), _ = _take_tokens(rest, 1)
            ok = self._tree().search(self._type().parse(text))
            self._say(f"{'Found' if ok else 'Not found'} {text}")
        elif cmd == "REMOVE":
            (text,), _ = _take_tokens(rest, 1)
            ok = self._tree().remove(self._type().parse(text))
            self._say(f"{'Removed' if ok else 'No such'} {text}")
        elif cmd == "PRINT":
            self._print(rest)
        elif cmd == "PAIRS":
            tree = self._tree()
            fmt = tree.element_type.format
            for value, parent in tree.to_pairs():
                shown = "NULL" if parent is None else fmt(parent)
                self._say(f"{fmt(value)} - {shown}")
        elif cmd == "BALANCE":
            self._tree().balance()
            self._say("Balanced")
        elif cmd == "LOAD":
            self._load(rest, more)
        elif cmd == "MERGE":
            (other,), _ = _take_tokens(rest, 1)
            target = self._tree()
            target.merge(self._tree(other))
            self._say(f"Merged {other}")
        elif cmd == "SUBTREE":
            (text,), _ = _take_tokens(rest, 1)
            tree = self._tree()
            sub = tree.subtree(tree.element_type.parse(text))
            if sub is None:
                sub = BinaryTree(type(tree.element_type)())
            name = self.current + "_sub"
            self.trees[name] = sub
            self._say(f"Subtree {name}")
        elif cmd == "CONTAINS":
            (other,), _ = _take_tokens(rest, 1)
            target = self._tree()
            ok = target.contains_subtree(self._tree(other))
            self._say("Yes" if ok else "No")
        elif cmd == "PATH":
            (path,), _ = _take_tokens(rest, 1)
            tree = self._tree()
            value = tree.find_by_path(path)
            if value is None:
                self._say("No node")
            else:
                self._say(tree.element_type.format(value))
        else:
            self._say("Unknown command")

    def _print(self, rest: str) -> None:
        (order,), _ = _take_tokens(rest, 1)
        tree = self._tree()
        if order == "IN":
            self._say(tree.inorder_string())
        elif order == "PRE":
            self._say(tree.preorder_string())
        elif order == "POST":
            self._say(tree.postorder_string())
        elif order == "FORM":
            self._say(tree.formatted_string())
        elif order == "TREE":
            self.output.write(tree.render())
        else:
            self._say("Unknown order")

    def _load(self, rest: str, more: Iterator[str]) -> None:
        (sub,), rest = _take_tokens(rest, 1)
        if sub == "STR":
            (order,), remainder = _take_tokens(rest, 1)
            self._tree().load_traversal(remainder, order)
            self._say("Loaded from str")
        elif sub == "FORM":
            self._tree().load_formatted(rest)
            self._say("Loaded formatted")
        elif sub == "PAIRS":
            (count_text,), _ = _take_tokens(rest, 1)
            count = max(_leading_int(count_text), 0)
            tree = self._tree()
            parse = tree.element_type.parse
            words = self._read_tokens(2 * count, more)
            pairs = [
                (parse(a), None if b == "NULL" else parse(b))
                for a, b in zip(words[0::2], words[1::2])
            ]
            try:
                tree.load_pairs(pairs)
            except ValueError:
                pass
            self._say("Loaded pairs")

    def run(self, lines: Iterable[str]) -> None:
        """Run every command read from ``lines`` until they run out."""
        source = iter(lines)
        while True:
            line = self._next_line(source)
            if line is None:
                return
            self.execute(line, source)


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input and write results to standard output."""
    parser = argparse.ArgumentParser(
        prog="bstmenu", description="Manage binary search trees with line commands read from stdin."
    )
    parser.parse_args(argv)
    session = MenuSession(sys.stdout)
    try:
        session.run(sys.stdin)
    except (MenuError, ValueError) as exc:
        sys.stdout.flush()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())