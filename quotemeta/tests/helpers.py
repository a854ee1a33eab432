# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import os
import shutil
import subprocess


def find_shell(name: str):
    if os.name != 'posix':
        return None
    return shutil.which(name)


def run_shell_script(shell: str, script: bytes) -> bytes:
    env = dict(os.environ, LC_ALL='C')
    return subprocess.check_output([shell, '-c', script], env=env)


def echo_through_shell(shell: str, escaped: bytes) -> bytes:
    """
    Have the shell parse ``escaped`` as a single word
    and print back the resulting argument verbatim
    """
    return run_shell_script(shell, b"printf '%s' " + escaped)


def count_words_in_shell(shell: str, escaped: bytes) -> int:
    output = run_shell_script(shell, b'set -- ' + escaped + b"; printf '%s' \"$#\"")
    return int(output)
