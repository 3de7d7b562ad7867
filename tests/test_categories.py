"""
Tests for Category API Endpoints

Tests for /category endpoints.
"""

from fastapi import status


class TestListCategories:
    """Tests for GET /category endpoint."""

    def test_list_categories_empty(self, client):
        """Test listing categories when database is empty."""
        response = client.get("/category")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_categories_with_data(self, client, sample_category, second_category):
        """Test listing categories returns every category, oldest first."""
        response = client.get("/category")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [c["title"] for c in data] == ["Classic Literature", "Science Fiction"]
        assert data[0]["_id"] == sample_category.id

    def test_list_categories_without_token(self, client, sample_category):
        """Test that reading needs no authentication."""
        response = client.get("/category", headers={})

        assert response.status_code == status.HTTP_200_OK


class TestGetCategory:
    """Tests for GET /category/{id} endpoint."""

    def test_get_category_success(self, client, sample_category):
        """Test getting a category by ID."""
        response = client.get(f"/category/{sample_category.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["_id"] == sample_category.id
        assert data["title"] == "Classic Literature"
        assert "createdAt" in data
        assert "updatedAt" in data
        assert "id" not in data

    def test_get_category_not_found_returns_null(self, client):
        """Test that an unknown id answers 200 with a null body."""
        response = client.get("/category/0123456789abcdef01234567")

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "null"

    def test_get_category_malformed_id_returns_null(self, client):
        """Test that ids of the wrong shape are simply not found."""
        response = client.get("/category/not-an-id")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None


class TestCreateCategory:
    """Tests for POST /category endpoint."""

    def test_create_category_success(self, client, auth_headers):
        """Test creating a category answers 200 with the new object."""
        response = client.post(
            "/category",
            json={"title": "RandomTitle_123"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "RandomTitle_123"
        assert len(data["_id"]) == 24

    def test_create_category_visible_in_list(self, client, auth_headers):
        """Test that a created category is listed right away."""
        created = client.post(
            "/category", json={"title": "Poetry"}, headers=auth_headers
        ).json()

        ids = [c["_id"] for c in client.get("/category").json()]

        assert created["_id"] in ids

    def test_create_category_strips_title(self, client, auth_headers):
        response = client.post(
            "/category", json={"title": "  Poetry  "}, headers=auth_headers
        )

        assert response.json()["title"] == "Poetry"

    def test_create_category_empty_title(self, client, auth_headers):
        """Test that whitespace-only title is rejected."""
        response = client.post("/category", json={"title": "   "}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_category_missing_title(self, client, auth_headers):
        response = client.post("/category", json={}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_category_without_token(self, client):
        """Test that creating requires a bearer token."""
        response = client.post("/category", json={"title": "Poetry"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert client.get("/category").json() == []

    def test_create_category_invalid_token(self, client):
        response = client.post(
            "/category",
            json={"title": "Poetry"},
            headers={"Authorization": "Bearer invalid_token_here"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestUpdateCategory:
    """Tests for PUT /category/{id} endpoint."""

    def test_update_category_title(self, client, sample_category, auth_headers):
        """Test updating the title is reflected on the next read."""
        response = client.put(
            f"/category/{sample_category.id}",
            json={"title": "Updated_RandomTitle_456"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Updated_RandomTitle_456"

        data = client.get(f"/category/{sample_category.id}").json()
        assert data["title"] == "Updated_RandomTitle_456"
        assert data["_id"] == sample_category.id

    def test_update_category_not_found(self, client, auth_headers):
        """Test updating a non-existent category returns 404."""
        response = client.put(
            "/category/0123456789abcdef01234567",
            json={"title": "Updated"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_category_without_token(self, client, sample_category):
        response = client.put(
            f"/category/{sample_category.id}", json={"title": "Updated"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert client.get(f"/category/{sample_category.id}").json()["title"] == "Classic Literature"


class TestDeleteCategory:
    """Tests for DELETE /category/{id} endpoint."""

    def test_delete_category_success(self, client, sample_category, auth_headers):
        """Test deleting answers 200 with a body, then reads return null."""
        response = client.delete(f"/category/{sample_category.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.text != ""
        assert response.json()["_id"] == sample_category.id

        get_response = client.get(f"/category/{sample_category.id}")
        assert get_response.status_code == status.HTTP_200_OK
        assert get_response.text == "null"

    def test_delete_category_twice(self, client, sample_category, auth_headers):
        """Test that a deleted category stays deleted."""
        client.delete(f"/category/{sample_category.id}", headers=auth_headers)

        response = client.delete(f"/category/{sample_category.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_category_with_books(self, client, sample_book, auth_headers):
        """Test that a category still used by books cannot be deleted."""
        category_id = sample_book.category_id

        response = client.delete(f"/category/{category_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert "still has 1 book" in response.json()["detail"]
        assert client.get(f"/category/{category_id}").json() is not None

    def test_delete_category_without_token(self, client, sample_category):
        response = client.delete(f"/category/{sample_category.id}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
