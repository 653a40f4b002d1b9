from binview.cli.main import run

run()
