import sys

from pagewindow.presentation.cli import main

sys.exit(main())
