from movie_api.api.app import main

main()
