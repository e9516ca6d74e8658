"""Enable running deploy-notify as a module: python -m deploy_notify."""

from deploy_notify.cli import main

if __name__ == "__main__":
    main()
