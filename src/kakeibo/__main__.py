from kakeibo.cli.app import app

app(prog_name="kakeibo")
