from src.recovery.cli import app

app(prog_name="lagrange-recover")
