import sys
from datetime import timedelta
from edulearn import create_app, db, bcrypt
from edulearn import dao
from edulearn.models import utcnow

DEMO_PASSWORD = 'password123'
PASSWORD_ROUNDS = 10


def seed_database():
    """Populate an empty schema with the EduLearn demo dataset.

    Must run inside an application context. Users and the parent-student link
    are created only if absent; everything else is inserted on every run.
    """
    now = utcnow()

    print("Starting database seed...")

    hashed_password = bcrypt.generate_password_hash(DEMO_PASSWORD, PASSWORD_ROUNDS).decode('utf-8')

    def create_demo_user(email, name, role):
        return dao.upsert_user({
            'email': email,
            'name': name,
            'password_hash': hashed_password,
            'role': role,
            'avatar': f'/avatars/{role.lower()}.jpg'
        })

    admin = create_demo_user('admin@lms.com', 'Admin User', 'ADMIN')
    teacher = create_demo_user('teacher@lms.com', 'John Smith', 'TEACHER')
    student = create_demo_user('student@lms.com', 'Jane Doe', 'STUDENT')
    parent = create_demo_user('parent@lms.com', 'Mary Johnson', 'PARENT')
    print("Demo users created")

    dao.upsert_parent_student_relation(parent.id, student.id, 'parent')
    print("Parent-student relationship created")

    math_course = dao.create_course({
        'title': 'Advanced Mathematics',
        'description': 'Comprehensive mathematics course covering algebra, calculus, and statistics.',
        'thumbnail': '/course-thumbnails/math.jpg',
        'level': 'INTERMEDIATE',
        'duration': 40,
        'price': 99.99,
        'is_published': True,
        'instructor_id': teacher.id
    })

    science_course = dao.create_course({
        'title': 'Physics Fundamentals',
        'description': 'Introduction to physics principles and applications.',
        'thumbnail': '/course-thumbnails/physics.jpg',
        'level': 'BEGINNER',
        'duration': 30,
        'price': 79.99,
        'is_published': True,
        'instructor_id': teacher.id
    })

    dao.create_course({
        'title': 'Web Development',
        'description': 'Learn modern web development with React and Next.js.',
        'thumbnail': '/course-thumbnails/programming.jpg',
        'level': 'INTERMEDIATE',
        'duration': 60,
        'price': 149.99,
        'is_published': True,
        'instructor_id': teacher.id
    })
    print("Sample courses created")

    math_lesson1 = dao.create_lesson({
        'title': 'Introduction to Algebra',
        'content': 'Basic algebraic concepts and operations.',
        'video_url': 'https://www.youtube.com/watch?v=example1',
        'order_index': 1,
        'duration': 45,
        'is_published': True,
        'course_id': math_course.id
    })

    dao.create_lesson({
        'title': 'Linear Equations',
        'content': 'Solving linear equations and systems.',
        'video_url': 'https://www.youtube.com/watch?v=example2',
        'order_index': 2,
        'duration': 50,
        'is_published': True,
        'course_id': math_course.id
    })
    print("Sample lessons created")

    math_quiz = dao.create_quiz({
        'title': 'Algebra Basics Quiz',
        'description': 'Test your understanding of basic algebra concepts.',
        'time_limit': 30,
        'passing_score': 70,
        'max_attempts': 3,
        'is_published': True,
        'course_id': math_course.id,
        'lesson_id': math_lesson1.id
    })

    dao.create_questions(math_quiz.id, [
        {
            'question_text': 'What is the value of x in the equation 2x + 5 = 15?',
            'question_type': 'MULTIPLE_CHOICE',
            'options': ['x = 5', 'x = 10', 'x = 7.5', 'x = 2.5'],
            'correct_answer': 'x = 5',
            'points': 2,
            'order_index': 1,
            'explanation': 'Subtract 5 from both sides: 2x = 10, then divide by 2: x = 5'
        },
        {
            'question_text': 'Is the equation y = 2x + 3 a linear equation?',
            'question_type': 'TRUE_FALSE',
            'options': ['True', 'False'],
            'correct_answer': 'True',
            'points': 1,
            'order_index': 2,
            'explanation': 'Yes, it follows the form y = mx + b, which is a linear equation.'
        },
        {
            'question_text': 'Solve for y: 3y - 7 = 14',
            'question_type': 'SHORT_ANSWER',
            'options': None,
            'correct_answer': '7',
            'points': 3,
            'order_index': 3,
            'explanation': 'Add 7 to both sides: 3y = 21, then divide by 3: y = 7'
        },
    ])
    print("Sample quiz and questions created")

    dao.create_enrollments([
        {
            'student_id': student.id,
            'course_id': math_course.id,
            'progress_percentage': 25,
            'last_accessed_at': now
        },
        {
            'student_id': student.id,
            'course_id': science_course.id,
            'progress_percentage': 10,
            'last_accessed_at': now
        },
    ])
    print("Student enrollments created")

    dao.create_quiz_attempt({
        'student_id': student.id,
        'quiz_id': math_quiz.id,
        'score': 5,
        'max_score': 6,
        'answers': {'1': 'x = 5', '2': 'True', '3': '7'},
        'completed_at': now,
        'time_taken': 15,
        'attempt_number': 1
    })
    print("Sample quiz attempt created")

    dao.create_messages([
        {
            'sender_id': student.id,
            'recipient_id': teacher.id,
            'subject': 'Question about Algebra',
            'content': 'Hi Mr. Smith, I have a question about the linear equations lesson. '
                       'Could you help me understand the concept better?',
            'created_at': now - timedelta(days=2)
        },
        {
            'sender_id': teacher.id,
            'recipient_id': student.id,
            'subject': 'Re: Question about Algebra',
            'content': "Hi Jane, I'd be happy to help! Linear equations are equations where the "
                       "highest power of the variable is 1. Let's schedule a time to discuss this further.",
            'read_at': now,
            'created_at': now - timedelta(days=1)
        },
        {
            'sender_id': parent.id,
            'recipient_id': teacher.id,
            'subject': "Jane's Progress",
            'content': "Hello Mr. Smith, I wanted to check on Jane's progress in your mathematics "
                       "course. How is she doing?",
            'created_at': now - timedelta(hours=3)
        },
    ])
    print("Sample messages created")

    dao.create_notifications([
        {
            'user_id': student.id,
            'title': 'Quiz Graded',
            'message': 'Your Algebra Basics Quiz has been graded. You scored 5/6!',
            'type': 'QUIZ_GRADED',
            'created_at': now - timedelta(hours=1)
        },
        {
            'user_id': student.id,
            'title': 'New Message',
            'message': f'You have a new message from {teacher.name}',
            'type': 'NEW_MESSAGE',
            'created_at': now - timedelta(hours=2)
        },
        {
            'user_id': teacher.id,
            'title': 'New Message',
            'message': f'You have a new message from {parent.name}',
            'type': 'NEW_MESSAGE',
            'created_at': now - timedelta(hours=3)
        },
    ])
    print("Sample notifications created")

    dao.create_blog_posts([
        {
            'title': 'Welcome to Our Learning Management System',
            'content': 'We are excited to announce the launch of our new LMS platform. This system will '
                       'help students, teachers, and parents stay connected and track academic progress.',
            'excerpt': 'Announcing the launch of our new LMS platform for better learning management.',
            'thumbnail': '/blog-thumbnails/welcome.jpg',
            'is_published': True,
            'published_at': now - timedelta(days=7)
        },
        {
            'title': 'Tips for Effective Online Learning',
            'content': 'Online learning requires different strategies than traditional classroom learning. '
                       'Here are some tips to help you succeed in your online courses.',
            'excerpt': 'Discover effective strategies for successful online learning.',
            'thumbnail': '/blog-thumbnails/tips.jpg',
            'is_published': True,
            'published_at': now - timedelta(days=3)
        },
    ])
    print("Sample blog posts created")

    dao.create_site_settings([
        {'key': 'site_name', 'value': 'EduLearn LMS', 'type': 'string'},
        {'key': 'site_description',
         'value': 'A comprehensive learning management system for modern education', 'type': 'string'},
        {'key': 'hero_title', 'value': 'Learn Anytime, Anywhere', 'type': 'string'},
        {'key': 'hero_subtitle',
         'value': 'Join our comprehensive learning platform and unlock your potential', 'type': 'string'},
        {'key': 'enable_registrations', 'value': 'true', 'type': 'boolean'},
    ])
    print("Site settings created")

    print("\n" + "=" * 60)
    print("    Demo accounts")
    print("=" * 60)
    for user in (admin, teacher, student, parent):
        print(f"  [{user.role}] {user.email}")
    print(f"  Password: {DEMO_PASSWORD} (shared)")
    print("=" * 60)
    print("Database seeding completed successfully!")


def release_connection():
    """Close the scoped session and dispose of the engine's connection pool."""
    db.session.remove()
    db.engine.dispose()


def main(app=None):
    """Run the seed and return a process exit status."""
    if app is None:
        app = create_app()
    with app.app_context():
        try:
            db.create_all()
            seed_database()
        except Exception:
            app.logger.exception("Error during seeding")
            return 1
        finally:
            release_connection()
    return 0


if __name__ == '__main__':
    sys.exit(main())
