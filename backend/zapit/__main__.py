from zapit.main import run

run()
