# Core: configuration, logging, exceptions, default collaborators
