"""
SQLAlchemy Data Access Object (DAO) layer.

Thin create/upsert helpers over the Flask-SQLAlchemy session. Every call
commits before returning, so records created by one call can be referenced
by id in the next. Errors from the store propagate to the caller unchanged.
"""

import json

from edulearn import db
from edulearn.models import (
    User, ParentStudentRelation, Course, Lesson, Quiz, Question,
    Enrollment, QuizAttempt, Message, Notification, BlogPost, SiteSetting,
)


# ---------------------------------------------------------------------------
# Generic primitives
# ---------------------------------------------------------------------------

def create(model, data):
    """Insert one row unconditionally. Returns the persisted instance."""
    obj = model(**data)
    db.session.add(obj)
    db.session.commit()
    return obj


def create_many(model, rows):
    """Insert several rows in a single commit. Returns the persisted instances."""
    objs = [model(**row) for row in rows]
    db.session.add_all(objs)
    db.session.commit()
    return objs


def upsert(model, where, create_data):
    """Return the row matching ``where``, creating it from ``create_data`` if absent.

    An existing row is returned unchanged.
    """
    existing = model.query.filter_by(**where).first()
    if existing is not None:
        return existing
    return create(model, create_data)


def _dump(value):
    if value is None:
        return None
    return json.dumps(value)


# ========================================================================
# Users  (table: users)
# ========================================================================

def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


def upsert_user(data):
    """Create a user keyed by email unless one already exists."""
    return upsert(User, {'email': data['email']}, data)


def upsert_parent_student_relation(parent_id, student_id, relationship_type='parent'):
    return upsert(
        ParentStudentRelation,
        {'parent_id': parent_id, 'student_id': student_id},
        {'parent_id': parent_id, 'student_id': student_id,
         'relationship_type': relationship_type},
    )


# ========================================================================
# Courses, lessons, quizzes
# ========================================================================

def create_course(data):
    return create(Course, data)


def create_lesson(data):
    return create(Lesson, data)


def create_quiz(data):
    return create(Quiz, data)


def create_questions(quiz_id, questions):
    """Batch-insert questions for a quiz. ``options`` lists are stored as JSON text."""
    rows = []
    for q in questions:
        row = dict(q)
        row['quiz_id'] = quiz_id
        row['options'] = _dump(row.get('options'))
        rows.append(row)
    return create_many(Question, rows)


# ========================================================================
# Student activity
# ========================================================================

def create_enrollments(rows):
    return create_many(Enrollment, rows)


def create_quiz_attempt(data):
    """Insert a quiz attempt. ``answers`` is a dict stored as JSON text."""
    row = dict(data)
    row['answers'] = json.dumps(row['answers'])
    return create(QuizAttempt, row)


def create_messages(rows):
    return create_many(Message, rows)


def create_notifications(rows):
    return create_many(Notification, rows)


# ========================================================================
# Site content
# ========================================================================

def create_blog_posts(rows):
    return create_many(BlogPost, rows)


def create_site_settings(rows):
    return create_many(SiteSetting, rows)
