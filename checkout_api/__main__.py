from checkout_api.main import run

run()
