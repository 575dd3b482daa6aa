from sshm.ui.cli import run

run()
