from query_json.cli.main import run

run()
