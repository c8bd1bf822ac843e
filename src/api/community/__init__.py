"""Community bounded context.

Users and their profiles, groups and memberships, group-scoped posts and
comments, user reports and notifications.
"""
