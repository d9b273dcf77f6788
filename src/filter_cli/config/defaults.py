"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
color: true

matching:
  method: normal
  case_sensitive: false
  tokenize: true
  sort: false
  levenshtein_sort: false

themes:
  default:
    highlight: "bold underline"
    selected: "reverse"
  solarized:
    highlight: "bold #b58900"
    selected: "bg:#073642 #93a1a1"
  mono:
    highlight: "underline"
    selected: "reverse"

templates:
  terminal: x-terminal-emulator
  ssh_client: ssh
  run_command: "{cmd}"
  run_shell_command: "{terminal} -e {cmd}"
"""
