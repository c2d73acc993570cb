from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

print('ROOT:')
print(client.get('/').json())

print('\nHEALTH:')
print(client.get('/health').json())

print('\nDB HEALTH:')
resp = client.get('/health/db')
print(resp.status_code, resp.json())

print('\nCREATE ISSUE:')
resp = client.post('/api/issues', data={
    'title': 'Pothole near school gate',
    'description': 'Deep pothole on the road outside the primary school.',
    'category': 'roads',
    'priority': 'high',
    'state': 'kerala',
    'district': 'ernakulam',
    'location': 'School Road, Kakkanad',
})
print(resp.status_code, resp.json())

print('\nLIST ISSUES:')
print(client.get('/api/issues', params={'limit': 5}).json())

print('\nSTATS:')
print(client.get('/api/analytics/stats').json())
