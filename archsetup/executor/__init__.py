"""
Setup execution subsystem.

Modules:
  plan.py     — pure plan builders: bootstrap steps and the install script,
                conditioned on the Installer record.
  commands.py — step executors: run_command, download_file.
  runner.py   — run a plan in order, fail fast on the first error.
"""
