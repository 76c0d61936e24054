from linecounter.main import run

run()
