from django.test import TestCase, Client
from django.urls import reverse
from django.contrib.auth import get_user_model

User = get_user_model()


class AuthenticationTestCase(TestCase):
    def setUp(self):
        self.client = Client()
        self.teacher = User.objects.create_user(
            username='teacher',
            password='testpass123',
            role='teacher'
        )

    def test_default_role_is_student(self):
        user = User.objects.create_user(username='someone', password='testpass123')
        self.assertEqual(user.role, User.Role.STUDENT)
        self.assertFalse(user.is_teacher())

    def test_superuser_gets_admin_role(self):
        user = User.objects.create_superuser(username='root', password='testpass123')
        self.assertTrue(user.is_admin())

    def test_login_redirects_to_attendance(self):
        """Test that a successful login lands on the attendance grid"""
        response = self.client.post(reverse('accounts:login'), {
            'username': 'teacher',
            'password': 'testpass123'
        })
        self.assertRedirects(response, reverse('attendance:grid'))

    def test_invalid_login_stays_on_page(self):
        response = self.client.post(reverse('accounts:login'), {
            'username': 'teacher',
            'password': 'wrong'
        })
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.wsgi_request.user.is_authenticated)

    def test_logout_returns_to_login(self):
        self.client.force_login(self.teacher)
        response = self.client.post(reverse('accounts:logout'))
        self.assertRedirects(response, reverse('accounts:login'))
