import sys

from ticket_machine.main import main

sys.exit(main())
