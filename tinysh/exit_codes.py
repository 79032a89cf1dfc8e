"""Exit codes returned by commands and the shell"""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1

# Program found but could not be run (or its output could not be read)
EXIT_CODE_EXECUTION_FAILED = 126

# Program is neither a builtin nor runnable
EXIT_CODE_COMMAND_NOT_FOUND = 127
