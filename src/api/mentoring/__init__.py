"""Mentoring bounded context.

Mentorships offered by eligible mentors, the participants who join them,
the dialogue exchanged during a mentorship and the evaluations left once it
concludes. Depends on the community context for user identity.
"""
