"""
Review endpoint tests
"""


def test_adding_review_returns_created_status(client, new_course):
    course = new_course()

    res = client.post(f'/courses/{course.id}/reviews',
                      json={'rating': 5, 'comment': 'This is good'})

    assert res.status_code == 201
    body = res.get_json()
    assert body['courseId'] == course.id
    assert body['rating'] == 5
    assert body['comment'] == 'This is good'
    assert body['id'] > 0


def test_course_id_in_body_is_ignored(client, new_course):
    course = new_course()
    other = new_course(name='Other')

    res = client.post(f'/courses/{course.id}/reviews',
                      json={'rating': 3, 'comment': 'ok', 'courseId': other.id})

    assert res.status_code == 201
    assert res.get_json()['courseId'] == course.id


def test_add_review_to_missing_course_returns_not_found(client):
    res = client.post('/courses/42/reviews', json={'rating': 5, 'comment': 'This is good'})

    assert res.status_code == 404
    assert client.get('/reviews').get_json() == []


def test_missing_course_wins_over_malformed_body(client):
    res = client.post('/courses/42/reviews', json={'rating': 'five'})

    assert res.status_code == 404


def test_review_malformed_body_is_bad_request(client, new_course):
    course = new_course()

    res = client.post(f'/courses/{course.id}/reviews', json={'rating': 'five', 'comment': 'x'})

    assert res.status_code == 400
    assert client.get('/reviews').get_json() == []


def test_review_missing_comment_is_bad_request(client, new_course):
    course = new_course()

    res = client.post(f'/courses/{course.id}/reviews', json={'rating': 4})

    assert res.status_code == 400
    assert [d['field'] for d in res.get_json()['details']] == ['comment']


def test_non_reviewed_course_returns_empty_array(client, new_course):
    course = new_course()

    res = client.get(f'/courses/{course.id}/reviews')

    assert res.status_code == 200
    assert res.get_json() == []


def test_reviews_of_missing_course_return_not_found(client):
    res = client.get('/courses/24/reviews')

    assert res.status_code == 404


def test_unknown_sub_path_returns_not_found(client):
    res = client.get('/courses/24/reviews00')

    assert res.status_code == 404


def test_find_all_reviews_regardless_of_course(client, new_course, new_review):
    course1 = new_course()
    new_review(course1.id)
    new_review(course1.id)
    course2 = new_course()
    new_review(course2.id)

    res = client.get('/reviews')

    assert res.status_code == 200
    assert len(res.get_json()) == 3


def test_reviews_of_course_only_include_that_course(client, new_course, new_review):
    course1 = new_course()
    new_review(course1.id)
    new_review(course1.id)
    course2 = new_course()
    new_review(course2.id)

    res = client.get(f'/courses/{course1.id}/reviews')

    reviews = res.get_json()
    assert res.status_code == 200
    assert len(reviews) == 2
    assert all(review['courseId'] == course1.id for review in reviews)


def test_reviews_endpoint_empty(client):
    res = client.get('/reviews')

    assert res.status_code == 200
    assert res.get_json() == []


def test_reviews_of_course_id_too_large_return_not_found(client):
    huge = '9' * 25

    assert client.get(f'/courses/{huge}/reviews').status_code == 404

    res = client.post(f'/courses/{huge}/reviews', json={'rating': 5, 'comment': 'This is good'})

    assert res.status_code == 404
    assert client.get('/reviews').get_json() == []


def test_rating_too_large_for_database_is_bad_request(client, new_course):
    course = new_course()

    res = client.post(f'/courses/{course.id}/reviews', json={'rating': 10**20, 'comment': 'x'})

    assert res.status_code == 400
    assert [d['field'] for d in res.get_json()['details']] == ['rating']
    assert client.get('/reviews').get_json() == []


def test_rating_integer_bounds(client, new_course):
    course = new_course()
    url = f'/courses/{course.id}/reviews'

    assert client.post(url, json={'rating': 2**31, 'comment': 'x'}).status_code == 400
    assert client.post(url, json={'rating': -2**31 - 1, 'comment': 'x'}).status_code == 400
    assert client.post(url, json={'rating': 2**31 - 1, 'comment': 'x'}).status_code == 201
