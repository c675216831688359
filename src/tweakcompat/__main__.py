from tweakcompat.ui.cli import run

run()
