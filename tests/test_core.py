import logging
import os
import stat

import go_import_fixer
from go_import_fixer.core import is_excluded
from go_import_fixer.core import iter_go_files
from go_import_fixer.core import process_file
from go_import_fixer.core import process_path

ORIGINAL = """
package main

import (
\t"github.com/some/package"
\t"log"
\t"foobar.com/useful/package"
\t"fmt"
\t"acme.com/awesome/package"
)

func main() {
\tfmt.Println("Hello world")
}
"""

ACME = """
package main

import (
\t"fmt"
\t"log"

\t"acme.com/awesome/package"

\t"foobar.com/useful/package"
\t"github.com/some/package"
)

func main() {
\tfmt.Println("Hello world")
}
"""

CHILD_ORIGINAL = '\npackage main\n\nimport (\n\t"github.com/some/package"\n\t"foobar.com/useful/package"\n\t"acme.com/awesome/package"\n)\n'
CHILD_ACME = '\npackage main\n\nimport (\n\t"acme.com/awesome/package"\n\n\t"foobar.com/useful/package"\n\t"github.com/some/package"\n)\n'

UNCLOSED = 'package main\nimport (\n\t"log"\n'


def _write_tree(root):
    (root / "main.go").write_text(ORIGINAL)
    (root / "subpackage" / "nested").mkdir(parents=True)
    (root / "subpackage" / "foo.go").write_text(CHILD_ORIGINAL)
    (root / "subpackage" / "nested" / "file.go").write_text(CHILD_ORIGINAL)
    (root / "vendor" / "lib").mkdir(parents=True)
    (root / "vendor" / "lib" / "lib.go").write_text(CHILD_ORIGINAL)
    (root / "README.md").write_text("import (\n)\n")


def test_package_exports_core_api():
    assert go_import_fixer.format_imports('import (\n\t"b"\n\t"a"\n)\n') == 'import (\n\t"a"\n\t"b"\n)\n'


def test_is_excluded_matches_path_and_parents(tmp_path):
    assert is_excluded(tmp_path / "vendor", tmp_path, ["vendor"])
    assert is_excluded(tmp_path / "vendor" / "lib" / "lib.go", tmp_path, ["vendor"])
    assert is_excluded(tmp_path / "gen" / "x_gen.go", tmp_path, ["*_gen.go"])
    assert not is_excluded(tmp_path / "main.go", tmp_path, ["vendor", ""])


def test_iter_go_files_skips_excluded_and_non_go(tmp_path):
    _write_tree(tmp_path)
    found = [p.relative_to(tmp_path).as_posix() for p in iter_go_files(str(tmp_path), ["vendor"])]
    assert found == ["main.go", "subpackage/foo.go", "subpackage/nested/file.go"]


def test_iter_go_files_single_file(tmp_path):
    _write_tree(tmp_path)
    assert list(iter_go_files(str(tmp_path / "main.go"))) == [tmp_path / "main.go"]


def test_process_file_check_does_not_modify(tmp_path):
    path = tmp_path / "main.go"
    path.write_text(ORIGINAL)
    assert process_file(str(path), "acme.com", apply=False)
    assert path.read_text() == ORIGINAL


def test_process_file_apply_rewrites_and_keeps_mode(tmp_path):
    path = tmp_path / "main.go"
    path.write_text(ORIGINAL)
    os.chmod(path, 0o640)
    assert process_file(str(path), "acme.com", apply=True)
    assert path.read_text() == ACME
    assert stat.S_IMODE(path.stat().st_mode) == 0o640
    assert sorted(p.name for p in tmp_path.iterdir()) == ["main.go"]
    # Second run: already canonical
    assert not process_file(str(path), "acme.com", apply=True)


def test_process_path_formats_non_excluded_files(tmp_path):
    _write_tree(tmp_path)
    assert process_path(str(tmp_path), "acme.com", ["vendor"], apply=True) == 1
    assert (tmp_path / "main.go").read_text() == ACME
    assert (tmp_path / "subpackage" / "foo.go").read_text() == CHILD_ACME
    assert (tmp_path / "subpackage" / "nested" / "file.go").read_text() == CHILD_ACME
    assert (tmp_path / "vendor" / "lib" / "lib.go").read_text() == CHILD_ORIGINAL
    assert process_path(str(tmp_path), "acme.com", ["vendor"], apply=True) == 0


def test_process_path_excluded_file_is_not_touched(tmp_path):
    _write_tree(tmp_path)
    process_path(str(tmp_path), "acme.com", ["main.go", "other_file.go"], apply=True)
    assert (tmp_path / "main.go").read_text() == ORIGINAL


def test_process_path_reports_errors_and_continues(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    (tmp_path / "a_broken.go").write_text(UNCLOSED)
    (tmp_path / "b_main.go").write_text(ORIGINAL)
    assert process_path(str(tmp_path), "acme.com", apply=True) == 2
    assert (tmp_path / "a_broken.go").read_text() == UNCLOSED
    assert (tmp_path / "b_main.go").read_text() == ACME
    assert "unclosed import block" in caplog.text
    assert "file updated." in caplog.text
