"""Allow `python -m jenkins_rbac`."""

from jenkins_rbac.main import main

main()
