import io
import sys

import pytest

from bstmenu.menu import MenuError, MenuSession, main


def run_script(text):
    out = io.StringIO()
    MenuSession(out).run(io.StringIO(text))
    return out.getvalue().splitlines()


def test_create_insert_print_inorder():
    lines = run_script("CREATE t INT\nINSERT 5\nINSERT 3\nINSERT 8\nPRINT IN\n")
    assert lines == ["Created t", "Inserted 5", "Inserted 3", "Inserted 8", "3 5 8"]


def test_duplicate_insert_reports_exists():
    lines = run_script("CREATE t INT\nINSERT 4\nINSERT 4\n")
    assert lines[-1] == "Exists 4"


def test_search_and_remove():
    lines = run_script(
        "CREATE t INT\nINSERT 2\nSEARCH 2\nSEARCH 9\nREMOVE 2\nREMOVE 2\nPRINT IN\n"
    )
    assert lines[2:] == ["Found 2", "Not found 9", "Removed 2", "No such 2", ""]


def test_unknown_messages():
    lines = run_script("CREATE t WHAT\nCREATE t INT\nFOO\nSELECT nope\nPRINT SIDEWAYS\n")
    assert lines == ["Unknown type", "Created t", "Unknown command", "No such tree", "Unknown order"]


def test_empty_line_skipped_but_blank_line_is_unknown():
    lines = run_script("CREATE t INT\n\n   \n")
    assert lines == ["Created t", "Unknown command"]


def test_select_switches_current_tree():
    lines = run_script("CREATE a INT\nINSERT 1\nCREATE b INT\nINSERT 7\nSELECT a\nPRINT IN\n")
    assert lines[-2:] == ["Selected a", "1"]


def test_pairs_output():
    lines = run_script("CREATE t INT\nINSERT 5\nINSERT 3\nINSERT 8\nPAIRS\n")
    assert lines[-3:] == ["5 - NULL", "3 - 5", "8 - 5"]


def test_load_pairs_reads_following_lines_and_keeps_remainder():
    lines = run_script("CREATE t INT\nLOAD PAIRS 2\n5 NULL 3\n5 PRINT IN\n")
    assert lines == ["Created t", "Loaded pairs", "3 5"]


def test_load_pairs_without_root_clears_tree():
    lines = run_script("CREATE t INT\nINSERT 1\nLOAD PAIRS 1\n4 2\nPRINT IN\n")
    assert lines[-2:] == ["Loaded pairs", ""]


def test_load_pairs_at_end_of_input_raises():
    session = MenuSession(io.StringIO())
    with pytest.raises(MenuError):
        session.run(io.StringIO("CREATE t INT\nLOAD PAIRS 2\n1 NULL\n"))


def test_load_str_inserts_tokens():
    lines = run_script("CREATE t INT\nLOAD STR PRE 5 3 8 3\nPRINT PRE\n")
    assert lines[-2:] == ["Loaded from str", "5 3 8"]


def test_formatted_round_trip():
    out = run_script("CREATE t INT\nINSERT 5\nINSERT 3\nINSERT 8\nINSERT 4\nPRINT FORM\n")
    formatted = out[-1]
    again = run_script(f"CREATE u INT\nLOAD FORM {formatted}\nPRINT FORM\n")
    assert again[-2:] == ["Loaded formatted", formatted]


def test_balance_makes_median_root():
    lines = run_script("CREATE t INT\nINSERT 1\nINSERT 2\nINSERT 3\nBALANCE\nPRINT PRE\n")
    assert lines[-2:] == ["Balanced", "2 1 3"]


def test_subtree_and_contains():
    lines = run_script(
        "CREATE t INT\nINSERT 5\nINSERT 3\nINSERT 8\nINSERT 2\n"
        "SUBTREE 3\nCONTAINS t_sub\nSELECT t_sub\nPRINT PRE\nCONTAINS t\n"
    )
    assert lines[-5:] == ["Subtree t_sub", "Yes", "Selected t_sub", "3 2", "No"]


def test_subtree_of_missing_key_is_empty():
    lines = run_script("CREATE t INT\nINSERT 5\nSUBTREE 9\nSELECT t_sub\nPRINT IN\n")
    assert lines[-1] == ""


def test_merge_inserts_other_values():
    lines = run_script(
        "CREATE a INT\nINSERT 1\nCREATE b INT\nINSERT 2\nINSERT 1\nMERGE a\nPRINT IN\n"
    )
    assert lines[-2:] == ["Merged a", "1 2"]


def test_merge_unknown_tree_raises():
    session = MenuSession(io.StringIO())
    session.execute("CREATE a INT")
    with pytest.raises(MenuError):
        session.execute("MERGE ghost")


def test_path_lookup():
    lines = run_script("CREATE t INT\nINSERT 5\nINSERT 3\nINSERT 8\nPATH L\nPATH R\nPATH LL\n")
    assert lines[-3:] == ["3", "8", "No node"]


def test_print_tree_empty():
    out = io.StringIO()
    session = MenuSession(out)
    session.execute("CREATE t INT")
    session.execute("PRINT TREE")
    assert out.getvalue() == "Created t\n(empty)\n"


def test_complex_values_printed_back():
    lines = run_script("CREATE z COMPLEX\nINSERT 1+2i\nPRINT IN\n")
    assert lines[-2:] == ["Inserted 1+2i", "1+2i"]


def test_string_tree_orders_words():
    lines = run_script("CREATE s STRING\nINSERT pear\nINSERT apple\nPRINT IN\n")
    assert lines[-1] == "apple pear"


def test_command_without_tree_raises():
    session = MenuSession(io.StringIO())
    with pytest.raises(MenuError):
        session.execute("INSERT 3")


def test_bad_value_raises():
    session = MenuSession(io.StringIO())
    session.execute("CREATE t INT")
    with pytest.raises(ValueError):
        session.execute("INSERT abc")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("CREATE t INT\nINSERT 6\nPRINT IN\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["Created t", "Inserted 6", "6"]


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("INSERT 6\n"))
    assert main([]) == 1
    assert "no tree selected" in capsys.readouterr().err