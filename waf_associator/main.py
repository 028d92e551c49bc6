"""WAF Associator - Main entry point.

Reconcile an API Gateway stage's WAF association after deployment.
"""
from waf_associator.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
