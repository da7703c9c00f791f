from searchwords.cli import run

run()
