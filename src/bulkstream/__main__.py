from bulkstream.cli import run

run()
