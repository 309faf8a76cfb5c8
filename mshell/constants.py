"""Shell-wide constants: builtin names, redirection operators and error messages."""

from __future__ import annotations

from enum import IntEnum

ECHO_COMMAND = "echo"
CD_COMMAND = "cd"
PWD_COMMAND = "pwd"
EXPORT_COMMAND = "export"
UNSET_COMMAND = "unset"
ENV_COMMAND = "env"
EXIT_COMMAND = "exit"

BUILTINS: frozenset[str] = frozenset(
    {
        ECHO_COMMAND,
        CD_COMMAND,
        PWD_COMMAND,
        EXPORT_COMMAND,
        UNSET_COMMAND,
        ENV_COMMAND,
        EXIT_COMMAND,
    }
)

REDIRECTION_TO_FILE = ">"
REDIRECTION_TO_INPUT = "<"
APPEND_REDIRECTION = ">>"
HEREDOC_REDIRECTION = "<<"

STATUS_CODE = "$?"
NL_FLAG = "-n"
TEMP_FILE = "/tmp/Martho_Heredoc_temp.txt"
PERMS = 0o664

EXIT_FAILURE = 1
EXIT_SUCCESS = 0

GET_STATUS = 1
SET_STATUS = 0

INIT_ENVP = 0
GET_ENVP = 1
SET_ENVP = 2
EXIT_ENVP = 3

# Error messages
NO_FILE_AFTER_REDIRECTION = "No file/delimeter after redirection"
FAILED_TO_GET_FILE = "Failed to get file/delimeter"
FILE_DOES_NOT_EXIST = "File does not exist"
INVALID_DELIMITER = "Invalid delimeter"
UNCLOSED_QUOTE = "Unclosed quote in command"
ENVP_ALLOCATION_FAILED = "Failed to allocate memory for n_envp."
ALLOCATION_FAILED = "Failed to allocate memory."


class Operation(IntEnum):
    """Kind of redirection a token stands for."""

    RTF = 0  # redirection to file: >
    RTI = 1  # redirection from input: <
    AR = 2  # append redirection: >>
    HDR = 3  # heredoc: <<

    @property
    def token(self) -> str:
        """The operator text for this redirection."""
        return _TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> "Operation":
        """Return the operation written as ``token``; raise ValueError otherwise."""
        for op, text in _TOKENS.items():
            if text == token:
                return op
        raise ValueError(f"not a redirection operator: {token!r}")


_TOKENS: dict[Operation, str] = {
    Operation.RTF: REDIRECTION_TO_FILE,
    Operation.RTI: REDIRECTION_TO_INPUT,
    Operation.AR: APPEND_REDIRECTION,
    Operation.HDR: HEREDOC_REDIRECTION,
}


def is_builtin(name: str) -> bool:
    """Tell whether ``name`` is one of the shell's builtin commands."""
    return name in BUILTINS