"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the interpreter using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./spilang",
        "./spi.py",
        "--exclude=spilang/tests",
        "--max-line-length=120",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./spilang",
        "./spi.py",
        "--ignore=tests",
    ], check=True)


if __name__ == "__main__":
    main()
