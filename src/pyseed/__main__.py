from pyseed.cli import app

app(prog_name="pyseed")
