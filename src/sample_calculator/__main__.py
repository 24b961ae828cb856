"""Allow ``python -m sample_calculator``."""

from sample_calculator.main import main

main()
