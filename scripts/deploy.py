import os
import sys

base_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(base_dir)
sys.path.insert(0, project_root)

from tckt_deploy.deploy import main

if __name__ == "__main__":
    sys.exit(main())
