"""
Houses the tests for the service layer of the program. This layer is what manages the internal API, and is
what any interface should use to speak through when communicating with the rest of the system.

Most tests run once against each set of repositories, through the parametrized ``repositories`` fixture.
"""
