# bstmenu

An unbalanced binary search tree that holds values of one element type and
keeps no duplicates. It comes with a small line-oriented command interpreter
for working with several named trees.

## Element types

`bstmenu.elements` defines the element types. Each one parses a value from
text, orders two values and formats a value for printing. Pick one by name
with `element_type_for`. An unknown name raises `ValueError`.

| Name       | Class          | Values                                      | Ordering                                         |
|------------|----------------|---------------------------------------------|--------------------------------------------------|
| `INT`      | `IntType`      | 32-bit signed integers                      | numeric                                          |
| `DOUBLE`   | `DoubleType`   | floats, printed with six significant digits | numeric                                          |
| `COMPLEX`  | `ComplexType`  | complex numbers such as `3`, `2i`, `1-4i`   | by squared magnitude, then real, then imaginary  |
| `STRING`   | `StringType`   | text                                        | dictionary order                                 |
| `FUNCTION` | `FunctionType` | the functions `inc1`, `inc2`, `inc3`        | by object identity, printed as `Func@<hex id>`   |
| `PERSON`   | `PersonType`   | names, as text                              | dictionary order                                 |

Parsing rules:

- `INT` reads the leading integer and ignores any characters after it.
- `DOUBLE` reads the leading number in the same way.
- A value outside the type's range, or text that does not parse, raises
  `ValueError`.

To make a new element type, subclass `ElementType`. Implement `parse` and
`format`. `compare` defaults to the `<` and `>` operators.

## Library use

```python
from bstmenu.elements import element_type_for
from bstmenu.tree import BinaryTree

tree = BinaryTree(element_type_for("INT"))
for value in (5, 3, 8, 1, 4):
    tree.insert(value)

print(tree.inorder_string())    # 1 3 4 5 8
print(tree.preorder_string())   # 5 3 1 4 8
print(tree.formatted_string())  # {5}({3}({1}()[])[{4}()[]])[{8}()[]]
print(4 in tree, len(tree))     # True 5
print(list(tree))               # [1, 3, 4, 5, 8]
print(tree.find_by_path("LR"))  # 4

tree.remove(3)
tree.balance()
print(tree.render())
```

Other `BinaryTree` methods:

- `insert(value)` returns `False` when an equal value is already present.
- `search(key)` returns whether an equal value is present.
- `remove(key)` returns whether a value was found and removed.
- `clear()` empties the tree.
- `postorder_string()` returns the values in left-right-root order.
- `subtree(key)` returns a new tree copied from the node equal to `key`, or
  `None` when no such node exists.
- `contains_subtree(sub)` reports whether `sub` occurs somewhere in the tree
  with the same values and the same shape. An empty `sub` always counts as
  contained.
- `merge(other)` inserts every value of `other`, in level order.
- `to_pairs()` returns `(value, parent)` pairs in level order. The root's
  parent is `None`.
- `load_pairs(pairs)` rebuilds the tree from such pairs. The first pair
  without a parent is inserted first, then every pair that has a parent.
  It raises `ValueError` if no pair is a root.
- `load_traversal(text, order)` clears the tree, then inserts each
  whitespace-separated token in turn. `order` does not change the result.
- `load_formatted(text)` clears the tree, then inserts every `{value}` found
  in `text`, in order.
- `find_by_path(path)` follows `L` (left) and `R` or `P` (right) steps from
  the root, case-insensitively, ignoring other characters. It returns the
  value reached, or `None`.
- `render()` returns a text drawing of the tree with `/` and `\`
  connectors. An empty tree renders as `(empty)`.

## The command menu

Install the package and run:

```
bstmenu
```

Commands are read from standard input, one per line, and results are written
to standard output:

```
CREATE nums INT
INSERT 5
INSERT 3
INSERT 8
PRINT IN
PRINT TREE
SEARCH 3
REMOVE 3
PAIRS
BALANCE
LOAD STR IN 4 2 6
LOAD FORM {5}({3}()[])[{8}()[]]
LOAD PAIRS 3
5 NULL
3 5
8 5
SUBTREE 3
CONTAINS nums_sub
MERGE nums_sub
PATH LR
```

What the commands do:

- `CREATE name TYPE` makes a tree and selects it. The type is one of the
  names in the table above.
- `SELECT name` switches to an existing tree.
- `INSERT`, `SEARCH`, `REMOVE`, `BALANCE`, `PAIRS` and `PATH` act on the
  selected tree.
- `PRINT` takes one of `IN`, `PRE`, `POST`, `FORM` or `TREE`.
- `LOAD STR <order> values...` loads the values from the same line.
- `LOAD FORM text` loads every `{value}` in the rest of the line.
- `LOAD PAIRS n` reads the next `n` value and parent pairs, with `NULL`
  marking the root.
- `SUBTREE value` stores the copied subtree under the current tree's name
  with `_sub` appended. The current tree stays selected. If the value is
  absent, the new tree is empty.
- `MERGE other` and `CONTAINS other` take another tree's name.
- Unknown commands print `Unknown command`.

If a value does not parse, or a command needs a tree that does not exist, the
command stops. It prints `error: ...` to standard error and exits with
status 1. The command takes no options other than `--help`.

The interpreter can also be driven from Python:

```python
import io
from bstmenu.menu import MenuSession

out = io.StringIO()
MenuSession(out).run(["CREATE t STRING", "INSERT pear", "INSERT apple", "PRINT IN"])
print(out.getvalue())
```

`MenuSession.execute(line, lines)` runs a single command. It reads any
further input that command needs from `lines`. Failures raise
`bstmenu.menu.MenuError` or `ValueError`.

## Limits

- Trees live only in memory for the length of a session. Nothing is saved to
  disk.
- The menu reads commands without prompting.
- Trees are never rebalanced automatically, only by `balance()`.

## Tests

```
pip install -e ".[test]"
pytest
```