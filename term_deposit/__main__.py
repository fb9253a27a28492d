"""Run the development server: ``python -m term_deposit``."""

from term_deposit.app import create_app

if __name__ == "__main__":
    create_app().run(port=5000, debug=True)
