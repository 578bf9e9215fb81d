from arborette.cli import app

app(prog_name="arborette")
