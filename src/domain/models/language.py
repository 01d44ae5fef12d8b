"""Programming language value object."""

import re
from enum import Enum

_VERSION_SUFFIX = re.compile(r"\s+\(.*\)")


class Language(str, Enum):
    CPP = "C++"
    PYTHON = "Python"
    JAVA = "Java"
    C = "C"
    CSHARP = "C#"
    KOTLIN = "Kotlin"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    RUBY = "Ruby"
    GO = "Go"
    RUST = "Rust"
    SWIFT = "Swift"
    HASKELL = "Haskell"
    SCALA = "Scala"
    PHP = "PHP"
    PERL = "Perl"
    FPC = "FPC"
    OCAML = "OCaml"
    BASH = "Bash"
    LUA = "Lua"
    NODEJS = "Node.js"
    D = "D"
    NIM = "Nim"
    CRYSTAL = "Crystal"
    ADA = "Ada"
    DELPHI = "Delphi"
    R = "R"
    TCL = "Tcl"
    PIKE = "Pike"
    PASCAL_ABC_NET = "PascalABC.NET"
    PICAT = "Picat"
    FACTOR = "Factor"
    COBOL = "Cobol"
    BEFUNGE = "Befunge"
    IO = "Io"
    J = "J"
    QSHARP = "Q#"
    ROCO = "Roco"
    PLAIN_TEXT = "Plain Text"
    TEXT = "Text"
    SQL = "SQL"
    OTHER = "Other"

    @classmethod
    def from_raw(cls, raw: str | None) -> "Language":
        """Normalize a judge's raw language label, e.g. ``C++ 20 (gcc 12.2)``."""
        if not raw:
            return cls.OTHER

        name = _VERSION_SUFFIX.sub("", raw).lower()
        for matches, language in _RULES:
            if matches(name):
                return language
        return cls.OTHER

    def __str__(self) -> str:
        return self.value


# Ordered: earlier rules shadow later ones ("pascalabc" before "scala",
# "delphi" before the bare "d" prefix).
_RULES = [
    (lambda s: "c++" in s or "g++" in s or "cpp" in s or "clang++" in s, Language.CPP),
    (lambda s: "python" in s or "pypy" in s, Language.PYTHON),
    (lambda s: "java" in s and "javascript" not in s, Language.JAVA),
    (lambda s: "c#" in s, Language.CSHARP),
    (lambda s: "rust" in s, Language.RUST),
    (lambda s: "go" in s, Language.GO),
    (lambda s: "kotlin" in s, Language.KOTLIN),
    (lambda s: "javascript" in s, Language.JAVASCRIPT),
    (lambda s: "typescript" in s, Language.TYPESCRIPT),
    (lambda s: s == "c" or "gnu c11" in s, Language.C),
    (lambda s: "ruby" in s, Language.RUBY),
    (lambda s: "swift" in s, Language.SWIFT),
    (lambda s: "haskell" in s, Language.HASKELL),
    (lambda s: "pascalabc" in s, Language.PASCAL_ABC_NET),
    (lambda s: "scala" in s, Language.SCALA),
    (lambda s: "php" in s, Language.PHP),
    (lambda s: "perl" in s, Language.PERL),
    (lambda s: "fpc" in s, Language.FPC),
    (lambda s: "ocaml" in s, Language.OCAML),
    (lambda s: "bash" in s, Language.BASH),
    (lambda s: "lua" in s, Language.LUA),
    (lambda s: "node" in s, Language.NODEJS),
    (lambda s: "nim" in s, Language.NIM),
    (lambda s: "crystal" in s, Language.CRYSTAL),
    (lambda s: "ada" in s, Language.ADA),
    (lambda s: "delphi" in s, Language.DELPHI),
    (lambda s: s.startswith("d"), Language.D),
    (lambda s: s == "r", Language.R),
    (lambda s: "tcl" in s, Language.TCL),
    (lambda s: "pike" in s, Language.PIKE),
    (lambda s: "picat" in s, Language.PICAT),
    (lambda s: "factor" in s, Language.FACTOR),
    (lambda s: "cobol" in s, Language.COBOL),
    (lambda s: "befunge" in s, Language.BEFUNGE),
    (lambda s: "io" in s, Language.IO),
    (lambda s: s == "j", Language.J),
    (lambda s: "q#" in s or s == "qsharp", Language.QSHARP),
    (lambda s: "roco" in s, Language.ROCO),
    (lambda s: "plain" in s, Language.PLAIN_TEXT),
    (lambda s: "text" in s, Language.TEXT),
    (lambda s: "sql" in s, Language.SQL),
]
