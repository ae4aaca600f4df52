from slidesearch.cli import app

app(prog_name="slidesearch")
