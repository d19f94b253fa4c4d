from unicode_punctuation.cli import app

app()
