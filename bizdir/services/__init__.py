"""Application services layer.

Services hold collaborator capabilities the UI consumes (such as the session
provider). They should avoid UI concerns.
"""
