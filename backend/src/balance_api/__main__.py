from balance_api.main import run

run()
